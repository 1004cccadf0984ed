"""Centralized CLD source cases used across parser/build/world tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class CldCase:
    name: str
    source: str
    parses_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


ORIGIN_ONLY = _dedent(
    """
    @Origin Genesis {
        描述: "the first light",
        年份: 0
    }
    """
)

TWO_ORIGINS = _dedent(
    """
    @Origin Genesis { 年份: 0 }
    @Origin Rebirth { 年份: 1 }
    """
)

ANCHORED_CORE_EVENT = _dedent(
    """
    @Origin Genesis {
        核心锚点: [AnchorEvent]
    }
    @CoreEvent AnchorEvent {
        描述: "the anchor"
    }
    """
)

ANCHORED_PLAIN_EVENT = _dedent(
    """
    @Origin Genesis {
        核心锚点: [AnchorEvent]
    }
    @Event AnchorEvent {
        描述: "the anchor"
    }
    """
)

MULTILINE_STRING_LIST = '@Origin Genesis {\n    notes: ["""multi\nline"""]\n}\n'

FULL_WORLD = _dedent(
    """
    // a world with one of every kind
    @Origin Genesis {
        核心锚点: [FirstFire, GreatFlood],
        描述: \"\"\"A world
    born twice\"\"\",
        年份: -3.5e2,
        稳定: true,
    }
    @Timeline MainLine { 起点: Genesis }
    @Event Harvest { 重复: false, tags: ["autumn", [1, 2]] }
    @CoreEvent FirstFire { 年份: 12 }
    @CoreEvent GreatFlood { 年份: 400 }
    @Niche River { capacity: 40 }
    @Era Bronze { from: 1000, to: 2000 }
    @Generator Storms { rate: 0.25 }
    @Memory Elders { holder: River }
    @Immune Plague { resistant: [River, Elders] }  # trailing comment
    """
)

PARSER_CASES: tuple[CldCase, ...] = (
    CldCase(name="origin_only", source=ORIGIN_ONLY),
    CldCase(name="two_origins_parse_fine", source=TWO_ORIGINS),
    CldCase(name="anchored_core_event", source=ANCHORED_CORE_EVENT),
    CldCase(name="multiline_string_list", source=MULTILINE_STRING_LIST),
    CldCase(name="full_world", source=FULL_WORLD),
    CldCase(name="empty_document", source=""),
    CldCase(name="comments_only", source="# nothing\n// still nothing\n"),
    CldCase(name="empty_body", source="@Era Void {}\n"),
    CldCase(name="quoted_name", source='@Niche "Deep Sea" { depth: 11000 }\n'),
    CldCase(name="trailing_list_comma", source="@Era E { xs: [1, 2,] }\n"),
    CldCase(name="unknown_directive", source="@Planet Mars { x: 1 }\n", parses_cleanly=False),
    CldCase(name="missing_colon", source="@Era E { x 1 }\n", parses_cleanly=False),
    CldCase(name="unterminated_string", source='@Era E { x: "open }\n', parses_cleanly=False),
    CldCase(name="missing_brace", source="@Era E x: 1\n@Niche N {}\n", parses_cleanly=False),
    CldCase(name="stray_top_level_token", source="x: 1\n@Era E {}\n", parses_cleanly=False),
    CldCase(name="unclosed_list", source="@Era E { xs: [1, 2 }\n", parses_cleanly=False),
)
