"""Market time series endpoints."""

from __future__ import annotations

from typing import Any

from cradle.api.models import TimeSeriesRecord
from cradle.api.runtime.rest import RestEndpointSpec

from ._params import wire_value


def build_time_series_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the time series listing.

    ``market_id`` is sent as ``market``. When ``start_time`` is set the
    back-end receives an empty ``duration_sec`` and neither ``start_time``
    nor ``end_time``; this mirrors what the deployed server accepts today.
    """
    filters = params.get("filters")
    q: dict[str, Any] = {}
    if filters is None:
        return q
    if filters.market_id:
        q["market"] = filters.market_id
    if filters.asset:
        q["asset"] = filters.asset
    if filters.interval:
        q["interval"] = wire_value(filters.interval)
    # TODO: send start_time/end_time once the server's duration_sec handling is confirmed
    if filters.start_time:
        q["duration_sec"] = ""
    if filters.data_provider:
        q["data_provider"] = filters.data_provider
    return q


TIME_SERIES_RECORD = RestEndpointSpec(
    id="time_series_record",
    method="GET",
    build_path=lambda p: f"/time-series/{p['id']}",
    result_type=TimeSeriesRecord,
)

TIME_SERIES_RECORDS = RestEndpointSpec(
    id="time_series_records",
    method="GET",
    build_path=lambda p: "/time-series",
    build_query=build_time_series_query,
    result_type=list[TimeSeriesRecord],
)

SPECS = (TIME_SERIES_RECORD, TIME_SERIES_RECORDS)
