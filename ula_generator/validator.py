import re
from re import Pattern

from ula_generator.IPv6Generator import CIDR_SUFFIX, GROUP_COUNT, PRIVATE_PREFIX

HEX_GROUP_PATTERN: Pattern = re.compile(r"[0-9a-fA-F]+")


def is_valid_private_ipv6(ipv6: str) -> bool:
    """Check that a string is a private IPv6 address with /64 CIDR notation.

    The accepted form is four colon separated hex groups, the first one
    starting with "fd", followed by ":/64". Zero compression ("::") and
    other prefix lengths are rejected. Group values are not range checked.
    """
    if not isinstance(ipv6, str) or not ipv6.endswith(CIDR_SUFFIX):
        return False

    groups = ipv6[: -len(CIDR_SUFFIX)].split(":")
    if len(groups) != GROUP_COUNT:
        return False

    if not groups[0].startswith(PRIVATE_PREFIX):
        return False

    # fullmatch also rejects empty groups
    return all(HEX_GROUP_PATTERN.fullmatch(group) for group in groups)
