"""Domain constants for the Conscious Spending Plan analytics."""

CSP_CATEGORIES = (
    "fixedCosts",
    "investments",
    "savingsGoals",
    "guiltFreeSpending",
)

NET_WORTH_COMPONENTS = (
    "assets",
    "investments",
    "savings",
    "debt",
)

BREAKDOWN_FIELDS = {
    "fixedCosts": (
        "rent",
        "utilities",
        "insurance",
        "carPayment",
        "phone",
        "internet",
        "groceries",
        "subscriptions",
        "haircut",
    ),
    "investments": (
        "rothIRA",
        "retirement401k",
        "stocks",
        "crypto",
    ),
    "savingsGoals": (
        "vacations",
        "wedding",
        "emergencyFund",
        "homeDownPayment",
        "gifts",
    ),
    "guiltFreeSpending": (
        "dining",
        "entertainment",
    ),
}

GOAL_PRIORITIES = ("high", "medium", "low")

HEALTHY_SCORE_THRESHOLD = 75
POINTS_PER_CATEGORY = 25

# Fixed-date projections count months as 30-day blocks.
DAYS_PER_PROJECTION_MONTH = 30

SCHEMA_VERSION = 3


__all__ = [
    "CSP_CATEGORIES",
    "NET_WORTH_COMPONENTS",
    "BREAKDOWN_FIELDS",
    "GOAL_PRIORITIES",
    "HEALTHY_SCORE_THRESHOLD",
    "POINTS_PER_CATEGORY",
    "DAYS_PER_PROJECTION_MONTH",
    "SCHEMA_VERSION",
]
