"""
Built-in English word lists used when no custom dictionaries are supplied.
"""

from typing import List


ADJECTIVES: List[str] = [
    "abandoned", "able", "absolute", "academic", "acceptable", "acclaimed",
    "accurate", "aching", "acidic", "acrobatic", "adorable", "adventurous",
    "aged", "agile", "agreeable", "alert", "amber", "ample", "ancient",
    "angelic", "antique", "anxious", "aquatic", "arctic", "aromatic", "astute",
    "autumn", "awesome", "azure", "bitter", "black", "blissful", "blue",
    "bold", "bouncy", "brave", "breezy", "brief", "bright", "brisk", "broken",
    "bubbly", "busy", "calm", "candid", "careful", "cheerful", "chilly",
    "clever", "cloudy", "coarse", "cold", "colossal", "cosmic", "cozy",
    "crimson", "crisp", "curious", "damp", "dapper", "daring", "dark",
    "dazzling", "delicate", "delirious", "dense", "dizzy", "dreamy", "dusty",
    "eager", "early", "earnest", "elastic", "elegant", "emerald", "empty",
    "endless", "epic", "fancy", "fearless", "festive", "fierce", "flat",
    "floral", "fluffy", "fragrant", "frosty", "fuzzy", "gentle", "giant",
    "gifted", "glossy", "golden", "graceful", "grand", "green", "groovy",
    "hidden", "hollow", "honest", "humble", "hungry", "icy", "idle",
    "imaginary", "jolly", "jumpy", "keen", "kind", "late", "lazy", "lively",
    "lonely", "loud", "lucky", "lunar", "magic", "mellow", "mighty", "misty",
    "modern", "muddy", "nameless", "narrow", "nimble", "noble", "odd", "old",
    "orange", "patient", "plucky", "polished", "proud", "purple", "pushy",
    "quick", "quiet", "radiant", "rapid", "rare", "red", "restless", "rough",
    "round", "rusty", "serene", "shiny", "shy", "silent", "silver", "sleepy",
    "slow", "small", "snowy", "soft", "solar", "solitary", "sparkling",
    "spicy", "steady", "still", "stormy", "sturdy", "subtle", "sunny",
    "swift", "tall", "tender", "thirsty", "tidy", "tiny", "twilight", "vast",
    "velvet", "vivid", "wandering", "warm", "weathered", "white", "wild",
    "windy", "wise", "witty", "wooden", "young", "zealous", "zesty",
]

NOUNS: List[str] = [
    "acorn", "anchor", "apple", "arrow", "badge", "bagel", "ball", "banjo",
    "basket", "beacon", "bean", "bell", "berry", "bird", "blanket", "boat",
    "bolt", "book", "boot", "bottle", "breeze", "brick", "bridge", "brook",
    "brush", "bucket", "butterfly", "button", "cabin", "cactus", "camera",
    "candle", "canyon", "cart", "castle", "cherry", "cliff", "cloud",
    "clover", "coast", "comet", "compass", "cookie", "coral", "crane",
    "crayon", "creek", "crown", "cup", "daisy", "dawn", "desk", "dew",
    "dolphin", "dragon", "dream", "drum", "dune", "eagle", "ember", "engine",
    "falcon", "feather", "fern", "field", "fire", "firefly", "flower", "fog",
    "forest", "fountain", "fox", "frog", "frost", "galaxy", "garden", "gate",
    "glacier", "glade", "grass", "guitar", "hammer", "harbor", "hat", "haze",
    "hill", "honey", "island", "jacket", "jungle", "kettle", "kite",
    "ladder", "lake", "lamp", "lantern", "leaf", "lemon", "lighthouse",
    "lily", "magnet", "maple", "meadow", "meteor", "mirror", "moon",
    "mountain", "nail", "needle", "nest", "night", "oak", "ocean", "orbit",
    "otter", "owl", "paddle", "pail", "paper", "parrot", "pebble", "pencil",
    "pepper", "piano", "pillow", "pine", "planet", "pond", "puddle",
    "quill", "rabbit", "rain", "rainbow", "raven", "reef", "river", "robot",
    "rocket", "roll", "sail", "sand", "scarf", "sea", "shadow", "shell",
    "ship", "silence", "sky", "smoke", "snow", "snowflake", "socket",
    "sound", "spark", "spoon", "star", "stone", "storm", "sun", "sunset",
    "surf", "swan", "table", "teapot", "thunder", "tiger", "torch", "tower",
    "train", "tree", "tulip", "tunnel", "turtle", "valley", "violet",
    "voice", "volcano", "wagon", "water", "wave", "whale", "whistle",
    "wildflower", "willow", "wind", "window", "wolf", "wood", "yarn",
]
