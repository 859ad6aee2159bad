SUMMARY_LIMIT = 100
ELLIPSIS = '...'


def truncate_summary(text, limit=SUMMARY_LIMIT):
    if len(text) > limit:
        return f"{text[:limit]}{ELLIPSIS}"
    return text


def format_runtime(minutes):
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"


def format_rating(value):
    # 9.0 -> "9", 8.8 -> "8.8"; shortest round-trip form otherwise
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text
