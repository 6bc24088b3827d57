#!/usr/bin/env python3
"""Replay a campaign registry transaction script.

Loads a JSON transaction script, replays it in order against a freshly
bootstrapped in-memory registry, and reports every transaction result
together with the final registry state and the fee ledger.

Script format:
{
  "config": {"max_campaigns": 1000, "creation_fee": 1000, ...},
  "authorities": ["ST1TEST"],
  "start_height": 0,
  "transactions": [
    {"op": "set_beneficiary", "principal": "ST2TEST"},
    {"op": "register_campaign", "caller": "ST1TEST", "campaign_id": "camp-001",
     "region": "New York", "vaccine_type": "Pfizer",
     "target_population": 100000, "metadata": "Vaccine drive 2025"},
    {"op": "advance_blocks", "blocks": 5},
    {"op": "update_campaign", "caller": "ST1TEST", "campaign_id": "camp-001",
     "region": "California", "vaccine_type": "Moderna",
     "target_population": 200000}
  ]
}

Supported ops: set_beneficiary, set_creation_fee, register_campaign,
update_campaign, grant_authority, revoke_authority, advance_blocks.
register_campaign and update_campaign accept an optional block_height
that overrides the clock for that transaction only.

Exit codes:
- 0: script replayed (individual transactions may still have failed)
- 2: script missing or invalid
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import structlog
from pydantic import BaseModel, Field, ValidationError

from campaign_registry.application.services.campaign_registry_service import (
    CampaignRegistryService,
)
from campaign_registry.bootstrap import configure_structlog, create_campaign_registry
from campaign_registry.config.registry_config import RegistryConfig
from campaign_registry.domain.models.registry_result import RegistryResult
from campaign_registry.infrastructure.observability import (
    generate_correlation_id,
    set_correlation_id,
)
from campaign_registry.infrastructure.stubs import (
    AuthorityOracleStub,
    BlockHeightClockStub,
    InMemoryFeeLedger,
)


# ---------------------------------------------------------------------------
# Script models
# ---------------------------------------------------------------------------


class ConfigOverrides(BaseModel):
    """Registry settings for the replay. Omitted fields keep their defaults."""

    max_campaigns: int | None = Field(default=None, ge=1)
    creation_fee: int | None = Field(default=None, ge=0)
    region_capacity: int | None = Field(default=None, ge=1)
    burn_address: str | None = Field(default=None, min_length=1)
    atomic_capacity_check: bool | None = None

    def to_config(self) -> RegistryConfig:
        return RegistryConfig(**self.model_dump(exclude_none=True))


class SetBeneficiaryTx(BaseModel):
    op: Literal["set_beneficiary"]
    principal: str


class SetCreationFeeTx(BaseModel):
    op: Literal["set_creation_fee"]
    amount: int


class RegisterCampaignTx(BaseModel):
    op: Literal["register_campaign"]
    caller: str
    campaign_id: str
    region: str
    vaccine_type: str
    target_population: int
    metadata: str = ""
    block_height: int | None = Field(default=None, ge=0)


class UpdateCampaignTx(BaseModel):
    op: Literal["update_campaign"]
    caller: str
    campaign_id: str
    region: str
    vaccine_type: str
    target_population: int
    block_height: int | None = Field(default=None, ge=0)


class GrantAuthorityTx(BaseModel):
    op: Literal["grant_authority"]
    principal: str


class RevokeAuthorityTx(BaseModel):
    op: Literal["revoke_authority"]
    principal: str


class AdvanceBlocksTx(BaseModel):
    op: Literal["advance_blocks"]
    blocks: int = Field(default=1, ge=0)


Transaction = Annotated[
    Union[
        SetBeneficiaryTx,
        SetCreationFeeTx,
        RegisterCampaignTx,
        UpdateCampaignTx,
        GrantAuthorityTx,
        RevokeAuthorityTx,
        AdvanceBlocksTx,
    ],
    Field(discriminator="op"),
]


class TransactionScript(BaseModel):
    config: ConfigOverrides = Field(default_factory=ConfigOverrides)
    authorities: list[str] = Field(default_factory=list)
    start_height: int = Field(default=0, ge=0)
    transactions: list[Transaction] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Replay (pure functions, testable)
# ---------------------------------------------------------------------------


class ReplayContext:
    """Registry plus the in-memory adapters it was wired with."""

    def __init__(self, script: TransactionScript) -> None:
        self.oracle = AuthorityOracleStub(script.authorities)
        self.ledger = InMemoryFeeLedger()
        self.clock = BlockHeightClockStub(script.start_height)
        self.registry: CampaignRegistryService = create_campaign_registry(
            script.config.to_config(),
            oracle=self.oracle,
            ledger=self.ledger,
            clock=self.clock,
        )


def parse_script(data: Any) -> TransactionScript:
    """Validate raw JSON data as a transaction script.

    Raises:
        pydantic.ValidationError: If the data does not match the format.
    """
    return TransactionScript.model_validate(data)


def load_script(path: Path) -> TransactionScript:
    return parse_script(json.loads(path.read_text(encoding="utf-8")))


def apply_transaction(ctx: ReplayContext, tx: Transaction) -> dict[str, Any]:
    """Apply one transaction and return its result as plain data."""
    registry = ctx.registry
    result: RegistryResult[Any]

    if isinstance(tx, SetBeneficiaryTx):
        result = registry.set_beneficiary(tx.principal)
    elif isinstance(tx, SetCreationFeeTx):
        result = registry.set_creation_fee(tx.amount)
    elif isinstance(tx, RegisterCampaignTx):
        result = registry.register_campaign(
            tx.campaign_id,
            tx.region,
            tx.vaccine_type,
            tx.target_population,
            tx.metadata,
            caller=tx.caller,
            now=tx.block_height,
        )
    elif isinstance(tx, UpdateCampaignTx):
        result = registry.update_campaign(
            tx.campaign_id,
            tx.region,
            tx.vaccine_type,
            tx.target_population,
            caller=tx.caller,
            now=tx.block_height,
        )
    elif isinstance(tx, GrantAuthorityTx):
        ctx.oracle.grant(tx.principal)
        result = RegistryResult.success(True)
    elif isinstance(tx, RevokeAuthorityTx):
        ctx.oracle.revoke(tx.principal)
        result = RegistryResult.success(True)
    else:
        result = RegistryResult.success(ctx.clock.advance(tx.blocks))

    return {"op": tx.op, **result.to_dict()}


def replay(
    script: TransactionScript, ctx: ReplayContext | None = None
) -> dict[str, Any]:
    """Replay a script against a fresh registry.

    Args:
        script: The validated transaction script.
        ctx: Registry to replay against. Built from the script when omitted.

    Returns:
        Dict with per-transaction results, the final state snapshot and
        the fee ledger contents.
    """
    log = structlog.get_logger()
    if ctx is None:
        ctx = ReplayContext(script)
    results = []
    for index, tx in enumerate(script.transactions):
        set_correlation_id(generate_correlation_id())
        outcome = apply_transaction(ctx, tx)
        results.append({"index": index, **outcome})

    failed = sum(1 for r in results if not r["ok"])
    log.info("replay_completed", transactions=len(results), failed=failed)
    return {
        "results": results,
        "state": ctx.registry.snapshot(),
        "fee_transfers": [t.to_dict() for t in ctx.ledger.transfers()],
        "block_height": ctx.clock.current(),
    }


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Replay a campaign registry transaction script."
    )
    parser.add_argument("script", type=Path, help="Path to the JSON transaction script")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the replay report here instead of stdout",
    )
    parser.add_argument(
        "--log-env",
        choices=["production", "development"],
        default="development",
        help="Log renderer (logs always go to stderr)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_structlog(args.log_env, stream=sys.stderr)
    log = structlog.get_logger()

    try:
        script = load_script(args.script)
    except FileNotFoundError:
        log.error("script_not_found", path=str(args.script))
        return 2
    except json.JSONDecodeError as e:
        log.error("script_not_json", path=str(args.script), error=str(e))
        return 2
    except ValidationError as e:
        log.error("script_invalid", path=str(args.script), errors=e.error_count())
        return 2

    try:
        ctx = ReplayContext(script)
    except ValueError as e:
        log.error("script_config_invalid", path=str(args.script), error=str(e))
        return 2

    report = replay(script, ctx)
    text = json.dumps(report, indent=2) + "\n"
    if args.output is None:
        sys.stdout.write(text)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
