from werkzeug.routing import IntegerConverter

# largest value an INTEGER column holds on PostgreSQL
MAX_ID = 2**31 - 1


class IdConverter(IntegerConverter):
    """Positive integer path segment that fits the id columns; anything else is a 404."""

    def __init__(self, map, *args, **kwargs):
        kwargs.setdefault("max", MAX_ID)
        super().__init__(map, *args, **kwargs)
