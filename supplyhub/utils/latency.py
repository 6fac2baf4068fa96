# supplyhub/utils/latency.py
import asyncio

from supplyhub.utils.settings import LATENCY_SCALE

# simulated round-trip per operation, in milliseconds
GET_ALL = 300
GET_BY_ID = 200
GET_BY_FOREIGN_KEY = 250
SEARCH = 300
CREATE = 400
CREATE_ORDER = 500
UPDATE = 350
UPDATE_STATUS = 300
DELETE = 250


async def simulate_latency(ms: int, scale: float | None = None) -> None:
    """Suspend the caller as if a request went over the network."""
    factor = LATENCY_SCALE if scale is None else scale
    if factor <= 0:
        return
    await asyncio.sleep(ms * factor / 1000)
