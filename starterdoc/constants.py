"""Shared defaults for taxonomy, file layout and document sections."""

from __future__ import annotations

DEFAULT_CATEGORIES: tuple[str, ...] = ("fundamental", "patterns", "applied", "advanced")

DEFAULT_CHAPTERS: tuple[str, ...] = (
    "basics",
    "encryption",
    "decryption",
    "access-control",
    "inputproof",
    "anti-patterns",
    "handles",
    "openzeppelin",
    "advanced",
    "fhe-operations",
)

DEFAULT_COMMON_TAGS: tuple[str, ...] = (
    "DeFi",
    "InfoFi",
    "DeSci",
    "Infra",
    "Gaming",
    "Social",
    "Governance",
    "NFT",
    "Identity",
    "Storage",
    "Science",
)

# concept name -> library calls whose presence in a contract implies the concept
DEFAULT_CONCEPTS: dict[str, tuple[str, ...]] = {
    "arithmetic-operations": (
        "FHE.add",
        "FHE.sub",
        "FHE.mul",
        "FHE.div",
        "FHE.rem",
        "FHE.neg",
        "FHE.min",
        "FHE.max",
    ),
    "bitwise-operations": (
        "FHE.and",
        "FHE.or",
        "FHE.xor",
        "FHE.not",
        "FHE.shr",
        "FHE.shl",
        "FHE.rotr",
        "FHE.rotl",
    ),
    "comparison-operations": ("FHE.eq", "FHE.ne", "FHE.ge", "FHE.gt", "FHE.le", "FHE.lt"),
    "ternary-operations": ("FHE.select",),
    "random-operations": (
        "FHE.randEuint256",
        "FHE.randEuint64",
        "FHE.randEuint32",
        "FHE.randEuint16",
        "FHE.randEuint8",
        "FHE.randEbool",
    ),
    "trivial-encryption": (
        "FHE.asEbool",
        "FHE.asEuint8",
        "FHE.asEuint16",
        "FHE.asEuint32",
        "FHE.asEuint64",
        "FHE.asEuint128",
        "FHE.asEuint256",
        "FHE.asEaddress",
    ),
    "access-control": (
        "FHE.allow",
        "FHE.allowThis",
        "FHE.allowTransient",
        "FHE.makePubliclyDecryptable",
        "FHE.isSenderAllowed",
    ),
}

DEFAULT_CATEGORY = "fundamental"
DEFAULT_CHAPTER = "basics"
DEFAULT_VERSION = "1.0.0"
DEFAULT_FHEVM_VERSION = "0.9.1"
DEFAULT_AUTHOR = "Unknown"

METADATA_FILENAME = "metadata.json"
DOCUMENT_FILENAME = "README.md"
CONTRACTS_DIRNAME = "contracts"
TESTS_DIRNAME = "test"
DIST_DIRNAME = "dist"
CONFIG_FILENAME = ".starterdoc.yml"

# Rendered document sections, always emitted in this order.
DOCUMENT_SECTIONS: tuple[str, ...] = (
    "overview",
    "usage",
    "prerequisites",
    "notes",
    "custom",
    "enums",
    "constants",
    "structs",
    "state_variables",
    "constructor",
    "functions",
)

SECTION_TITLES: dict[str, str] = {
    "overview": "Overview",
    "usage": "Usage",
    "prerequisites": "Prerequisites",
    "notes": "Notes",
    "custom": "Additional Information",
    "enums": "Enums",
    "constants": "Constants",
    "structs": "Structs",
    "state_variables": "State Variables",
    "constructor": "Constructor",
    "functions": "Functions",
}

NO_DESCRIPTION = "No description available."
EMPTY_CELL = "-"


__all__ = [
    "CONFIG_FILENAME",
    "CONTRACTS_DIRNAME",
    "DEFAULT_AUTHOR",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CATEGORY",
    "DEFAULT_CHAPTER",
    "DEFAULT_CHAPTERS",
    "DEFAULT_COMMON_TAGS",
    "DEFAULT_CONCEPTS",
    "DEFAULT_FHEVM_VERSION",
    "DEFAULT_VERSION",
    "DIST_DIRNAME",
    "DOCUMENT_FILENAME",
    "DOCUMENT_SECTIONS",
    "EMPTY_CELL",
    "METADATA_FILENAME",
    "NO_DESCRIPTION",
    "SECTION_TITLES",
    "TESTS_DIRNAME",
]
