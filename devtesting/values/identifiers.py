"""Random (version 4) UUIDs."""

from __future__ import annotations

import uuid

from devtesting.core.types import RandomNumberGenerator
from devtesting.values.primitives import random_bytes


def random_uuid(generator: RandomNumberGenerator) -> uuid.UUID:
    """Return a version 4, variant 2 UUID built from 16 random bytes.

    Per RFC 4122 sections 4.1.2 and 4.1.3, the top four bits of byte 6
    are set to the version (0100) and the top two bits of byte 8 to the
    variant (10).  Every other bit is taken from the generator as drawn.
    """
    data = bytearray(random_bytes(16, generator))
    data[6] = data[6] & 0x0F | 0x40
    data[8] = data[8] & 0x3F | 0x80
    return uuid.UUID(bytes=bytes(data))
