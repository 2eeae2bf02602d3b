"""
Basic usage example for the name generator.

This script demonstrates how to:
1. Get a name from the default generator
2. Add a trailing number via the builder
3. Use custom word lists
4. Combine casing, naming and length settings
"""

from random_names import (
    Casing,
    CasingStyle,
    Generator,
    GeneratorBuilder,
    Length,
    Naming,
    Separator,
)

# 1. Painless defaults
generator = Generator()
print(f"Your project is: {next(generator)}")

# 2. A trailing 4-digit number
generator = GeneratorBuilder().naming(Naming.numbered(4, Separator.dash())).build()
print(f"Your project is: {next(generator)}")

# 3. Custom dictionaries; this one can only ever return "imaginary-roll"
generator = GeneratorBuilder().adjectives(["imaginary"]).nouns(["roll"]).build()
assert next(generator) == "imaginary-roll"

# 4. camelCase, a zero-padded 2-digit number and at most 20 characters
generator = (
    GeneratorBuilder()
    .casing(Casing.of(CasingStyle.CAMEL_CASE))
    .naming(Naming.zero_padded(2, Separator.underscore()))
    .length(Length.truncate(20))
    .build()
)
for name in generator.take(3):
    print(f"My new name is: {name}")
