"""Mutation dispatch endpoint."""

from __future__ import annotations

from typing import Any

from cradle.api.config import MUTATION_PATH
from cradle.api.mutations import WireMutationResponse
from cradle.api.runtime.rest import RestEndpointSpec


def _process_body(params: dict[str, Any]) -> dict[str, Any]:
    return params["action"].to_wire()


PROCESS = RestEndpointSpec(
    id="process",
    method="POST",
    build_path=lambda p: MUTATION_PATH,
    build_body=_process_body,
    result_type=WireMutationResponse,
)

SPECS = (PROCESS,)
