"""Keyword-based assignment of ingredients to store aisles."""

from grocerylist.schemas import AisleCategory

# =============================================================================
# Classification Table
# =============================================================================

# Evaluated top to bottom; the first aisle with a keyword contained in the
# lower-cased name wins. "other" is the fallback and never listed here.
AISLE_KEYWORDS: tuple[tuple[AisleCategory, tuple[str, ...]], ...] = (
    (
        "produce",
        (
            "onion", "garlic", "tomato", "lettuce", "carrot", "celery", "pepper",
            "potato", "lemon", "lime", "apple", "banana", "avocado", "cilantro",
            "parsley", "basil", "ginger", "mushroom", "spinach", "kale", "broccoli",
            "zucchini", "cucumber", "jalapeño", "jalapeno", "scallion", "shallot",
            "corn", "cabbage", "asparagus", "beet", "radish", "squash", "pea",
            "green bean", "bell pepper", "chili", "herb", "mint", "dill", "chive",
            "leek", "fennel", "arugula", "romaine", "bok choy", "eggplant",
            "sweet potato", "mango", "pineapple", "berry", "strawberry", "blueberry",
            "raspberry", "grape", "peach", "pear", "orange", "grapefruit", "melon",
            "watermelon",
        ),
    ),
    (
        "meat-seafood",
        (
            "chicken", "beef", "pork", "lamb", "turkey", "bacon", "sausage",
            "ground", "steak", "salmon", "shrimp", "fish", "tuna", "cod",
            "tilapia", "crab", "lobster", "scallop", "prosciutto", "pancetta",
            "ham", "ribs", "brisket", "meatball", "anchovy",
        ),
    ),
    (
        "dairy-eggs",
        (
            "milk", "cream", "butter", "cheese", "yogurt", "egg", "sour cream",
            "cream cheese", "parmesan", "mozzarella", "cheddar", "feta", "ricotta",
            "half and half", "whipping cream", "heavy cream", "gruyere",
            "gouda", "brie", "mascarpone", "ghee",
        ),
    ),
    (
        "bakery",
        (
            "bread", "tortilla", "bun", "roll", "pita", "naan", "croissant",
            "bagel", "english muffin", "flatbread", "ciabatta", "sourdough",
        ),
    ),
    ("frozen", ("frozen", "ice cream")),
    (
        "pantry",
        (
            "flour", "sugar", "rice", "pasta", "noodle", "bean", "lentil",
            "chickpea", "oat", "cereal", "broth", "stock", "canned",
            "tomato paste", "coconut milk", "olive oil", "vegetable oil",
            "vinegar", "honey", "maple syrup", "peanut butter", "bread crumb",
            "cornstarch", "baking", "sesame oil", "soy", "panko", "almond",
            "walnut", "pecan", "pine nut", "cashew", "pistachio", "coconut",
            "chocolate", "cocoa", "vanilla", "brown sugar", "powdered sugar",
            "molasses", "agave", "tahini", "miso",
        ),
    ),
    (
        "spices-seasonings",
        (
            "salt", "pepper", "cumin", "paprika", "oregano", "thyme", "rosemary",
            "cinnamon", "nutmeg", "cayenne", "chili powder", "garlic powder",
            "onion powder", "bay leaf", "curry", "turmeric", "coriander",
            "cardamom", "clove", "allspice", "mustard powder", "red pepper flake",
            "italian seasoning", "everything bagel", "za'atar", "sumac",
            "smoked paprika", "saffron", "star anise", "five spice",
        ),
    ),
    (
        "condiments-sauces",
        (
            "ketchup", "mustard", "mayo", "mayonnaise", "soy sauce", "hot sauce",
            "sriracha", "worcestershire", "bbq sauce", "salsa", "ranch",
            "dressing", "fish sauce", "oyster sauce", "hoisin", "teriyaki",
            "buffalo sauce", "pesto", "marinara", "enchilada sauce",
        ),
    ),
    ("beverages", ("wine", "beer", "juice", "coffee", "tea", "broth")),
)

DEFAULT_AISLE: AisleCategory = "other"

# =============================================================================
# Display Metadata
# =============================================================================

AISLE_ORDER: tuple[AisleCategory, ...] = (
    "produce",
    "bakery",
    "meat-seafood",
    "dairy-eggs",
    "frozen",
    "pantry",
    "spices-seasonings",
    "condiments-sauces",
    "beverages",
    "other",
)

AISLE_LABELS: dict[AisleCategory, str] = {
    "produce": "Produce",
    "meat-seafood": "Meat & Seafood",
    "dairy-eggs": "Dairy & Eggs",
    "bakery": "Bakery",
    "frozen": "Frozen",
    "pantry": "Pantry",
    "spices-seasonings": "Spices & Seasonings",
    "condiments-sauces": "Condiments & Sauces",
    "beverages": "Beverages",
    "other": "Other",
}

AISLE_EMOJI: dict[AisleCategory, str] = {
    "produce": "\U0001F96C",
    "meat-seafood": "\U0001F969",
    "dairy-eggs": "\U0001F95A",
    "bakery": "\U0001F35E",
    "frozen": "\U0001F9CA",
    "pantry": "\U0001FAD9",
    "spices-seasonings": "\U0001F9C2",
    "condiments-sauces": "\U0001FAD7",
    "beverages": "\U0001F964",
    "other": "\U0001F4E6",
}


def assign_aisle(ingredient_name: str) -> AisleCategory:
    """
    Pick the aisle for an ingredient by substring keyword match.

    Matching is plain containment on the lower-cased name, so "roma tomatoes"
    and "Tomato Paste" both land in produce (produce is checked before pantry).
    """
    normalized = ingredient_name.lower()

    for aisle, keywords in AISLE_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return aisle

    return DEFAULT_AISLE
