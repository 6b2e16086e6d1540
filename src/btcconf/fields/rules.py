"""
Visibility and validation rules for the wizard.

Predicates decide whether a group is shown; validators decide whether a
value may be committed to a field. Both are pure functions of the current
session state. Normalizers rewrite text answers before they are checked.
All three are referenced by name from the field catalog.
"""

import os
from typing import Any

from btcconf.fields.exceptions import CatalogError, ValidationError
from btcconf.fields.models import Normalizer, Predicate, State, Validator, always_visible

# Keys the rules read from the session state
SERVER = "server"
DISABLE_WALLET = "disableWallet"
REINDEX_REQUESTED = "reindexRequested"
REINDEX_ACKNOWLEDGED = "reindexAcknowledged"
TXINDEX = "txindex"


# =============================================================================
# Group Visibility
# =============================================================================


def rpc_enabled(state: State) -> bool:
    """RPC details are only asked for when the RPC server is enabled."""
    return bool(state.get(SERVER, False))


def wallet_enabled(state: State) -> bool:
    """Wallet options are only asked for when the wallet is not disabled."""
    return not state.get(DISABLE_WALLET, True)


def reindex_requested(state: State) -> bool:
    """The danger zone only opens after the user asked to rebuild from genesis."""
    return bool(state.get(REINDEX_REQUESTED, False))


# =============================================================================
# Field Validation
# =============================================================================


def prune_conflicts_with_txindex(candidate: Any, state: State) -> None:
    """Reject a prune target while the transaction index is enabled."""
    if state.get(TXINDEX, False) and candidate != "0":
        raise ValidationError(
            "Pruning is incompatible with txindex: pruning discards the historical "
            "block data the transaction index needs. Disable 'Transaction Index' "
            "(txindex) to prune, or set prune to 0.",
            field="prune",
        )


def requires_reindex_acknowledgement(candidate: Any, state: State) -> None:
    """Reject enabling a reindex before the data-loss warning was accepted."""
    if candidate is True and not state.get(REINDEX_ACKNOWLEDGED, False):
        raise ValidationError(
            "Reindexing rebuilds the block index from disk and erases the existing "
            "indexes. Confirm 'I understand this erases data' first.",
        )


# =============================================================================
# Value Normalization
# =============================================================================


def expand_user(value: str) -> str:
    """Expand a leading ~ in a path; bitcoind takes paths literally."""
    return os.path.expanduser(value.strip()) if value else value


PREDICATES: dict[str, Predicate] = {
    "always": always_visible,
    "rpc_enabled": rpc_enabled,
    "wallet_enabled": wallet_enabled,
    "reindex_requested": reindex_requested,
}

VALIDATORS: dict[str, Validator] = {
    "prune_conflicts_with_txindex": prune_conflicts_with_txindex,
    "requires_reindex_acknowledgement": requires_reindex_acknowledgement,
}

NORMALIZERS: dict[str, Normalizer] = {
    "expand_user": expand_user,
}


def get_predicate(name: str | None) -> Predicate:
    """Look up a visibility predicate by name (None means always visible)."""
    if name is None:
        return always_visible
    try:
        return PREDICATES[name]
    except KeyError:
        raise CatalogError(f"Unknown visibility rule '{name}'") from None


def get_validator(name: str | None) -> Validator | None:
    """Look up a field validator by name."""
    if name is None:
        return None
    try:
        return VALIDATORS[name]
    except KeyError:
        raise CatalogError(f"Unknown validator '{name}'") from None


def get_normalizer(name: str | None) -> Normalizer | None:
    """Look up a value normalizer by name."""
    if name is None:
        return None
    try:
        return NORMALIZERS[name]
    except KeyError:
        raise CatalogError(f"Unknown normalizer '{name}'") from None
