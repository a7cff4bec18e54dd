"""Grocery category table and keyword categorizer."""

# =============================================================================
# Category Table
# =============================================================================

# Scanned in order; the first keyword contained in a name decides its category.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "produce",
        (
            "tomato",
            "onion",
            "garlic",
            "carrot",
            "celery",
            "potato",
            "lettuce",
            "spinach",
            "broccoli",
            "cauliflower",
            "pepper",
            "bell pepper",
            "jalapeño",
            "cucumber",
            "zucchini",
            "squash",
            "mushroom",
            "corn",
            "peas",
            "green beans",
            "cabbage",
            "kale",
            "arugula",
            "avocado",
            "lime",
            "lemon",
            "orange",
            "apple",
            "banana",
            "berry",
            "strawberry",
            "blueberry",
            "raspberry",
            "cilantro",
            "parsley",
            "basil",
            "thyme",
            "rosemary",
            "oregano",
            "ginger",
            "scallion",
            "shallot",
            "chive",
        ),
    ),
    (
        "meat",
        (
            "chicken",
            "beef",
            "pork",
            "turkey",
            "lamb",
            "sausage",
            "bacon",
            "ham",
            "ground beef",
            "ground turkey",
            "ground pork",
            "steak",
            "roast",
            "chop",
            "breast",
            "thigh",
            "wing",
        ),
    ),
    (
        "seafood",
        (
            "fish",
            "salmon",
            "tuna",
            "cod",
            "tilapia",
            "shrimp",
            "prawns",
            "crab",
            "lobster",
            "scallop",
            "mussel",
            "clam",
            "oyster",
        ),
    ),
    (
        "dairy",
        (
            "milk",
            "cream",
            "heavy cream",
            "sour cream",
            "yogurt",
            "cheese",
            "cheddar",
            "mozzarella",
            "parmesan",
            "butter",
            "eggs",
            "egg",
            "cream cheese",
            "cottage cheese",
            "ricotta",
        ),
    ),
    (
        "pantry",
        (
            "flour",
            "sugar",
            "brown sugar",
            "rice",
            "pasta",
            "noodles",
            "bread",
            "tortilla",
            "oil",
            "olive oil",
            "vegetable oil",
            "vinegar",
            "soy sauce",
            "worcestershire",
            "ketchup",
            "mustard",
            "mayo",
            "mayonnaise",
            "honey",
            "maple syrup",
            "peanut butter",
            "jam",
            "jelly",
            "oats",
            "cereal",
            "crackers",
            "chips",
            "beans",
            "black beans",
            "kidney beans",
            "chickpeas",
            "lentils",
            "quinoa",
            "couscous",
        ),
    ),
    (
        "spices",
        (
            "salt",
            "pepper",
            "black pepper",
            "garlic powder",
            "onion powder",
            "paprika",
            "cayenne",
            "cumin",
            "coriander",
            "cinnamon",
            "nutmeg",
            "vanilla",
            "chili powder",
            "red pepper flakes",
            "italian seasoning",
            "bay leaf",
            "curry powder",
        ),
    ),
    (
        "canned",
        (
            "tomato sauce",
            "tomato paste",
            "diced tomatoes",
            "crushed tomatoes",
            "broth",
            "stock",
            "chicken broth",
            "beef broth",
            "vegetable broth",
            "coconut milk",
        ),
    ),
    (
        "frozen",
        (
            "frozen",
            "ice cream",
            "frozen vegetables",
            "frozen fruit",
        ),
    ),
    (
        "beverages",
        (
            "water",
            "wine",
            "beer",
            "coffee",
            "tea",
            "juice",
            "soda",
        ),
    ),
    (
        "baking",
        (
            "baking powder",
            "baking soda",
            "yeast",
            "cornstarch",
            "cocoa powder",
            "chocolate chips",
            "vanilla extract",
            "almond extract",
        ),
    ),
)

# "other" is part of the set but categorize() never returns it
CATEGORIES: tuple[str, ...] = tuple(name for name, _ in CATEGORY_KEYWORDS) + ("other",)

DEFAULT_CATEGORY = "pantry"


def categorize(name: str) -> str:
    """Return the grocery category for an ingredient name."""
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        for keyword in keywords:
            if keyword in lowered:
                return category
    return DEFAULT_CATEGORY
