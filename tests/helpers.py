"""Shared test helpers."""


def usage_entry(timestamp, input_tokens=100, output_tokens=50, cache_read=0,
                cache_creation=0, **flags):
    """Build one transcript line with a usage block."""
    entry = {
        "timestamp": timestamp,
        "message": {
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "cache_read_input_tokens": cache_read,
                "cache_creation_input_tokens": cache_creation,
            }
        },
    }
    entry.update(flags)
    return entry
