from typing import Optional

from fastapi import Query

from ..domain.weight.normalize import DateOrder

date_order_query = Query(
    default=None,
    description="How to read slash dates such as 03/04/2024; defaults to the server setting.",
)

start_date_query = Query(
    default=None, description="Start date (inclusive) in YYYY-MM-DD format."
)
end_date_query = Query(default=None, description="End date (inclusive) in YYYY-MM-DD format.")


def resolve_date_order(requested: Optional[DateOrder], default: DateOrder) -> DateOrder:
    return requested if requested is not None else default
