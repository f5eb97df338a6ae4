# src/app/utils/filters/categories.py
TIMES = ("day", "night")
BUDGETS = ("$", "$$", "$$$")
LINK_CATEGORIES = ("maps", "yelp", "websites")

# 결과 카드에 표시되는 링크 라벨
LINK_LABELS = {
    "maps": "Google Maps",
    "yelp": "Yelp",
    "websites": "Website",
}

# 완화 순서: budget -> mood -> time -> links (ada는 완화하지 않음)
RELAXATION_ORDER = ("budget", "mood", "time", "links")

assert set(LINK_LABELS) == set(LINK_CATEGORIES)
