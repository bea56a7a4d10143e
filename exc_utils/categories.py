# exc_utils/categories.py
# Built-in taxonomy. The rule table is a list, not a dict: when a
# description matches triggers from two categories, the one declared
# first wins, so order here is part of the behaviour.

DEFAULT_CATEGORIES = [
    "Office Supplies",
    "Travel",
    "Meals & Entertainment",
    "Professional Services",
    "Marketing & Advertising",
    "Utilities",
    "Rent/Lease",
    "Insurance",
    "Software & Subscriptions",
    "Equipment",
    "Bank Fees",
    "Other",
]

DEFAULT_RULES = [
    (
        "Meals & Entertainment",
        [
            "restaurant", "cafe", "coffee", "starbucks", "mcdonald", "subway",
            "pizza", "burger", "food", "dining", "bar", "pub", "grill",
            "kitchen", "bistro", "tim hortons", "wendy", "kfc", "taco bell",
            "chipotle", "panera",
        ],
    ),
    (
        "Travel",
        [
            "airline", "hotel", "uber", "lyft", "taxi", "parking", "rental car",
            "airbnb", "flight", "airport", "gas station", "shell", "esso",
            "petro", "transit", "train", "bus",
        ],
    ),
    (
        "Office Supplies",
        ["staples", "office depot", "amazon", "paper", "supply", "pen", "printer"],
    ),
    (
        "Equipment",
        [
            "home depot", "lowes", "hardware", "tools", "equipment", "best buy",
            "electronics", "computer", "laptop",
        ],
    ),
    (
        "Software & Subscriptions",
        [
            "microsoft", "adobe", "google", "subscription", "saas", "software",
            "zoom", "slack", "dropbox", "netflix", "spotify", "annual fee",
        ],
    ),
    (
        "Utilities",
        [
            "electric", "power", "gas utility", "water", "internet", "phone",
            "hydro", "bell", "rogers", "telus",
        ],
    ),
    ("Insurance", ["insurance", "life ins", "health ins", "liability"]),
    (
        "Professional Services",
        ["legal", "accounting", "consultant", "lawyer", "cpa", "bookkeeping"],
    ),
    (
        "Marketing & Advertising",
        [
            "google ads", "facebook ads", "advertising", "marketing",
            "social media", "mailchimp", "constant contact",
        ],
    ),
    (
        "Bank Fees",
        [
            "bank fee", "service charge", "overdraft", "atm fee",
            "wire transfer", "monthly fee", "transaction fee",
        ],
    ),
]
