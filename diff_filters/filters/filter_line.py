# --- LINE-LEVEL SKIP RULES -------------------------------------------------
# (left, right) substring pairs: skip when left holds the first AND right holds the second
SKIP_LEFT_RIGHT_CONTAINS = {
    ("Lorem ipsum", "Dolor sit amet"),   # placeholder copy swapped for other placeholder copy
}

# Right-side prefixes (checked after stripping whitespace) that mark noise
SKIP_RIGHT_PREFIX = {
    "data-analytics",   # data-analytics-id=42, data-analytics-event="click"
}
