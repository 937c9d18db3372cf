"""Random identifiers for offers published without one.

The ``d`` tag addresses a replaceable listing, so ids only need to be
unique per author; a UUID4 string is enough and needs no shared state.
"""

import uuid


def generate_offer_id() -> str:
    return str(uuid.uuid4())
