"""Small enumerations that sit beside the key and signature catalogs.

Revocation reasons follow RFC 5280 CRLReason codes. The cipher registries list
the private-key protection schemes offered when exporting PKCS#8 and PKCS#12
containers.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List

from asn1crypto import algos, crl

from ..errors import NoSuchElement
from .table import require_text


class RevokeReasonCode(int, Enum):
    UNSPECIFIED = 0
    KEY_COMPROMISE = 1
    CA_COMPROMISE = 2
    AFFILIATION_CHANGED = 3
    SUPERSEDED = 4
    CESSATION_OF_OPERATION = 5
    CERTIFICATE_HOLD = 6
    UNKNOWN = 7
    REMOVE_FROM_CRL = 8
    PRIVILEGE_WITHDRAWN = 9
    AA_COMPROMISE = 10

    @property
    def code(self) -> int:
        return int(self.value)

    @property
    def description(self) -> str:
        return _REASON_DESCRIPTIONS[self]

    def to_crl_reason(self) -> crl.CRLReason | None:
        """asn1crypto CRLReason for this code; None for the unassigned code 7."""
        if self is RevokeReasonCode.UNKNOWN:
            return None
        return crl.CRLReason(self.name.lower())

    def __str__(self) -> str:
        return self.description

    @classmethod
    def for_code(cls, code: int | None) -> "RevokeReasonCode":
        if code is None:
            return cls.UNSPECIFIED
        for reason in cls:
            if reason.value == code:
                return reason
        return cls.UNSPECIFIED

    @classmethod
    def for_crl_reason(cls, reason: crl.CRLReason | None) -> "RevokeReasonCode":
        if reason is None:
            return cls.UNSPECIFIED
        return cls.__members__.get(str(reason.native).upper(), cls.UNSPECIFIED)

    @classmethod
    def for_description(cls, text: str | None) -> "RevokeReasonCode":
        require_text(text, "revocation reason description")
        for reason in cls:
            if reason.description == text:
                return reason
        raise NoSuchElement(f"no revocation reason described as {text!r}")

    @classmethod
    def valid_reasons(cls) -> List["RevokeReasonCode"]:
        """Reasons an operator may pick; code 7 is unassigned in RFC 5280."""
        return [r for r in cls if r is not cls.UNKNOWN]


_REASON_DESCRIPTIONS: Dict[RevokeReasonCode, str] = {
    RevokeReasonCode.UNSPECIFIED: "Unspecified",
    RevokeReasonCode.KEY_COMPROMISE: "Key Compromise",
    RevokeReasonCode.CA_COMPROMISE: "CA Compromise",
    RevokeReasonCode.AFFILIATION_CHANGED: "Affiliation Changed",
    RevokeReasonCode.SUPERSEDED: "Superseded",
    RevokeReasonCode.CESSATION_OF_OPERATION: "Cessation Of Operation",
    RevokeReasonCode.CERTIFICATE_HOLD: "Certificate Hold",
    RevokeReasonCode.UNKNOWN: "UNKNOWN",
    RevokeReasonCode.REMOVE_FROM_CRL: "Remove From CRL",
    RevokeReasonCode.PRIVILEGE_WITHDRAWN: "Privilege Withdrawn",
    RevokeReasonCode.AA_COMPROMISE: "AA Compromise",
}


class PKCS8Cipher(str, Enum):
    DES3_CBC = "DES3_CBC"
    AES_128_CBC = "AES_128_CBC"
    AES_192_CBC = "AES_192_CBC"
    AES_256_CBC = "AES_256_CBC"
    PBE_SHA1_RC4_128 = "PBE_SHA1_RC4_128"
    PBE_SHA1_RC4_40 = "PBE_SHA1_RC4_40"
    PBE_SHA1_3DES = "PBE_SHA1_3DES"
    PBE_SHA1_2DES = "PBE_SHA1_2DES"
    PBE_SHA1_RC2_128 = "PBE_SHA1_RC2_128"
    PBE_SHA1_RC2_40 = "PBE_SHA1_RC2_40"

    @property
    def oid(self) -> str:
        return _CIPHER_OIDS[self.value]

    @property
    def algorithm_name(self) -> str:
        """asn1crypto's name for the encryption scheme."""
        return algos.EncryptionAlgorithmId(self.oid).native


class PKCS12Cipher(str, Enum):
    DES3 = "DES3"
    AES128 = "AES128"
    AES192 = "AES192"
    AES256 = "AES256"

    @property
    def oid(self) -> str | None:
        # DES3 is the provider's legacy PBE default and carries no explicit OID
        return _CIPHER_OIDS.get(self.value)


_CIPHER_OIDS: Dict[str, str] = {
    "DES3_CBC": "1.2.840.113549.3.7",
    "AES_128_CBC": "2.16.840.1.101.3.4.1.2",
    "AES_192_CBC": "2.16.840.1.101.3.4.1.22",
    "AES_256_CBC": "2.16.840.1.101.3.4.1.42",
    "PBE_SHA1_RC4_128": "1.2.840.113549.1.12.1.1",
    "PBE_SHA1_RC4_40": "1.2.840.113549.1.12.1.2",
    "PBE_SHA1_3DES": "1.2.840.113549.1.12.1.3",
    "PBE_SHA1_2DES": "1.2.840.113549.1.12.1.4",
    "PBE_SHA1_RC2_128": "1.2.840.113549.1.12.1.5",
    "PBE_SHA1_RC2_40": "1.2.840.113549.1.12.1.6",
    "AES128": "2.16.840.1.101.3.4.1.2",
    "AES192": "2.16.840.1.101.3.4.1.22",
    "AES256": "2.16.840.1.101.3.4.1.42",
}

__all__ = ["RevokeReasonCode", "PKCS8Cipher", "PKCS12Cipher"]
