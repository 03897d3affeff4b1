from itertools import count

from modality.config import g

_counter = count()


def unique_id() -> str:
    """
    An opaque token that is unique for the lifetime of the process.
    Ids look like `:m0:`, `:m1:` with the default prefix
    """
    return f"{g['id_prefix']}{next(_counter)}:"
