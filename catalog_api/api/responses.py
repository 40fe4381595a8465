"""Response classes for the Catalog API."""

from typing import Any

import simplejson
from fastapi.responses import JSONResponse


class DecimalJSONResponse(JSONResponse):
    """JSON response that writes Decimal values as exact JSON numbers.

    The stock encoder goes through float, which drops digits on prices
    with more than 15 significant figures.
    """

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
