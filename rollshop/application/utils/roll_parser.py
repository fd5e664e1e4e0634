from __future__ import annotations

import re

from rollshop.domain.entities.customer_roll import CustomerRoll

# "<name> <verb> [particle] <1-4 digits> <points>", e.g. "宇宙和香 掷出了 672 点" or "Alice rolls 88 points"
ROLL_LINE_PATTERN = re.compile(
    r"^(.+?)\s*(?:掷|擲|rolls|rolled|roll|throws|threw)"
    r"(?:\s*(?:出|out))?(?:\s*(?:了|a|result))?"
    r"\s*([0-9]{1,4})\s*(?:点|points?|pts)",
    re.IGNORECASE,
)

# Echo of the /random command limit after the roll, e.g. "(最大100)" or "（max 100）"
MAX_ANNOTATION_PATTERN = re.compile(r"[(（]\s*(?:最大|max)", re.IGNORECASE)

# Channel / guild tags preceding the display name: "[Tag]", "<World>", "【Guild】"
BRACKET_PREFIX_PATTERN = re.compile(r"^(?:[\[(（【<][^\])）】>]+[\])）】>]\s*)+")

NAME_EXTRA_CHARS = frozenset("0123456789_- ")


def parse_customer_rolls(text: str) -> list[CustomerRoll]:
    """Extract (customer, roll) pairs from a pasted chat log.

    Lines that do not look like a roll result are dropped without error.
    Input order is kept and repeated names stay as separate entries.
    """
    rolls: list[CustomerRoll] = []
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        roll = parse_roll_line(line)
        if roll is not None:
            rolls.append(roll)
    return rolls


def parse_roll_line(line: str) -> CustomerRoll | None:
    match = ROLL_LINE_PATTERN.match(line)
    if not match:
        return None

    if MAX_ANNOTATION_PATTERN.search(line, match.end()):
        return None

    customer_id = clean_customer_name(match.group(1))
    if not customer_id:
        return None

    try:
        roll_value = int(match.group(2))
    except ValueError:
        return None

    return CustomerRoll(customer_id=customer_id, roll_value=roll_value)


def clean_customer_name(raw_name: str) -> str:
    name = BRACKET_PREFIX_PATTERN.sub("", raw_name)
    start = 0
    end = len(name)
    while start < end and not _is_name_char(name[start]):
        start += 1
    while end > start and not _is_name_char(name[end - 1]):
        end -= 1
    return name[start:end].strip()


def _is_name_char(ch: str) -> bool:
    return ch.isalpha() or ch in NAME_EXTRA_CHARS
