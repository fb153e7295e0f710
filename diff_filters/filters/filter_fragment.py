# --- FRAGMENT-LEVEL ACCEPT RULES -------------------------------------------
# Attribute names whose values are accepted as they are
ACCEPT_ATTR = {
    "tag",              # <item tag="v2.1"> – version/category labels change freely
}

# Tags whose text content is accepted
ACCEPT_TAG_CONTENT = {
    "title",            # <title>…</title> – page titles are edited often
    "ranking",          # <ranking>3</ranking> – recalculated on every build
}

# Fragments containing these substrings are accepted
ACCEPT_CONTAINS = {  # CAREFUL: CHECK FOR FALSE-POSITIVE!
    "ranking",          # "the ranking is high", data-ranking="12"
}
