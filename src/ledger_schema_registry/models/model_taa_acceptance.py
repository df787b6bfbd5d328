# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Transaction Author Agreement (TAA) acceptance body.

The ledger rejects write operations until the agent has accepted the TAA.
The defaults are the sample agreement published by the VON test network.
"""

from __future__ import annotations

from pydantic import BaseModel

SAMPLE_TAA_TEXT = (
    "This is a sample Transaction Authors Agreement **(TAA)**, for the VON "
    "test Network.\n\nOn public ledger systems this will typically contain "
    "legal constraints that must be accepted before any write operations "
    "will be permitted."
)


class ModelTaaAcceptance(BaseModel):
    """Body of ``POST /ledger/taa/accept``."""

    model_config = {"frozen": True, "extra": "forbid"}

    mechanism: str = "service_agreement"
    text: str = SAMPLE_TAA_TEXT
    version: str = "1.1"


__all__ = ["SAMPLE_TAA_TEXT", "ModelTaaAcceptance"]
