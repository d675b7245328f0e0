"""Country info blueprint module."""

from __future__ import annotations

from flask_smorest import Blueprint

blp = Blueprint(
    "CountryInfo",
    __name__,
    description="Country information and neighbour exchange rates",
)

from . import routes  # noqa: E402,F401
