"""Administrator policy language for the key types that may be created.

A policy is a whitespace separated list of tokens applied left to right::

    RSA EC_secp* -RSA_512 -EC_secp112*

``NAME`` adds every key type whose id or family equals NAME, ``NAME*`` adds
those whose id or family starts with NAME, ``*`` adds everything, and a
leading ``-`` removes instead of adding. Unknown names are ignored. A blank
policy allows every key type; a policy that allows nothing falls back to a
single safe default so callers never see an empty set.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..catalog.key_types import KEY_TYPES, KeyTypeDescriptor
from ..utils.logging import get_logger

log = get_logger()

SAFE_DEFAULT_ID = "EC_secp521r1"


@dataclass(frozen=True)
class PolicyToken:
    negate: bool
    wildcard: bool
    pattern: str

    def matches(self, kt: KeyTypeDescriptor) -> bool:
        if self.wildcard:
            return kt.id.startswith(self.pattern) or kt.family.value.startswith(self.pattern)
        return kt.id == self.pattern or kt.family.value == self.pattern


def tokenize(policy: str | None) -> List[PolicyToken]:
    tokens: List[PolicyToken] = []
    for raw in (policy or "").split():
        negate = raw.startswith("-")
        if negate:
            raw = raw[1:]
        wildcard = raw.endswith("*")
        if wildcard:
            raw = raw[:-1]
        if not raw and not wildcard:
            # a lone "-"
            continue
        tokens.append(PolicyToken(negate, wildcard, raw))
    return tokens


def _safe_default(catalog: Sequence[KeyTypeDescriptor]) -> KeyTypeDescriptor:
    for kt in catalog:
        if kt.id == SAFE_DEFAULT_ID:
            return kt
    return KEY_TYPES.find_by_id(SAFE_DEFAULT_ID)


def parse(policy: str | None, catalog: Iterable[KeyTypeDescriptor] = KEY_TYPES) -> List[KeyTypeDescriptor]:
    """Resolve ``policy`` to the allowed key types, in catalog order."""
    entries = list(catalog)
    if policy is None or not policy.strip():
        result = entries
    else:
        allowed = set()
        for token in tokenize(policy):
            matched = {kt.id for kt in entries if token.matches(kt)}
            if token.negate:
                allowed -= matched
            else:
                allowed |= matched
        result = [kt for kt in entries if kt.id in allowed]
    if not result:
        log.warning("key type policy %r allows nothing; using %s", policy, SAFE_DEFAULT_ID)
        return [_safe_default(entries)]
    return result


def get_allowed(policy: str | None, catalog: Iterable[KeyTypeDescriptor] = KEY_TYPES) -> List[KeyTypeDescriptor]:
    # re-parsed on every call so an edited policy applies immediately
    return parse(policy, catalog)


def get_default(
    policy: str | None,
    default_token: str | None,
    catalog: Iterable[KeyTypeDescriptor] = KEY_TYPES,
) -> KeyTypeDescriptor:
    """Default key type, always a member of ``get_allowed(policy)``."""
    entries = list(catalog)
    allowed = get_allowed(policy, entries)
    wanted = (default_token or "").strip()
    candidate = next((kt for kt in entries if kt.id == wanted), None) if wanted else None
    if candidate is None:
        if wanted:
            log.warning("unknown default key type %r; using %s", wanted, SAFE_DEFAULT_ID)
        candidate = _safe_default(entries)
    if candidate in allowed:
        return candidate
    log.warning("default key type %s is not allowed by policy; using %s", candidate.id, allowed[0].id)
    return allowed[0]


def get_index(
    descriptor: KeyTypeDescriptor | None,
    policy: str | None,
    catalog: Iterable[KeyTypeDescriptor] = KEY_TYPES,
) -> int:
    if descriptor is None:
        return 0
    allowed = get_allowed(policy, catalog)
    try:
        return allowed.index(descriptor)
    except ValueError:
        return 0


__all__ = ["PolicyToken", "SAFE_DEFAULT_ID", "tokenize", "parse", "get_allowed", "get_default", "get_index"]
