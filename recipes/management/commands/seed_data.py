# Fixed accounts created before the random ones so demos have known logins.
user_fixtures = [
    {"author_name": "marta", "gender": "female", "age": 38},
    {"author_name": "tomasz", "gender": "male", "age": 45},
    {"author_name": "ines", "gender": "female", "age": 24},
]

INGREDIENT_POOL = (
    "sea salt", "cracked pepper", "rapeseed oil", "shallots", "ginger",
    "chilli flakes", "coriander", "chickpeas", "red lentils", "coconut milk",
    "tinned tomatoes", "feta", "cheddar", "courgette", "aubergine",
    "sweet potato", "bell pepper", "honey", "dijon mustard", "cider vinegar",
    "oats", "self-raising flour", "brown sugar", "double cream", "free-range eggs",
    "salmon fillet", "pork mince", "thyme", "rosemary", "lime",
)

categories = ("Breakfast", "Brunch", "Lunch", "Dinner", "Dessert", "Snack", "Vegetarian")

# ISO-8601 durations for cook/prep times.
duration_pool = ("PT5M", "PT10M", "PT15M", "PT25M", "PT40M", "PT1H", "PT1H15M", "PT2H30M")

review_phrases = (
    "Made this twice this week already.",
    "Swapped the cream for yoghurt, still great.",
    "Needed more seasoning than listed.",
    "Quick, cheap and filling.",
    "The timings were spot on.",
    "Not for me, too sweet.",
    "My partner asked for seconds.",
    "Would halve the chilli next time.",
    "Solid weeknight dinner.",
    "Lovely texture, easy to follow.",
    "Oven needed an extra ten minutes.",
    "Froze well and reheated nicely.",
)
