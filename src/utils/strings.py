import re
from typing import List, Optional

_WHITESPACE = re.compile(r"\s")


def str2bool(v):
  return v.lower() in ("yes", "true", "t", "1")


def strip_whitespace(value: str) -> str:
    """Remove every whitespace character, including those inside words."""
    return _WHITESPACE.sub("", value)


def split_tag_names(species: Optional[str], skip_empty: bool = False) -> List[str]:
    """
    Turns a free-text, comma separated tag list into candidate tag names.

    All whitespace is removed before splitting, so "skin care" becomes "skincare".
    Consecutive or trailing commas yield empty names unless skip_empty is set.

    Examples:
        split_tag_names("skin care, massage,  facial") -> ["skincare", "massage", "facial"]
        split_tag_names("nails,") -> ["nails", ""]
        split_tag_names("nails,", skip_empty=True) -> ["nails"]
    """
    if species is None:
        return []
    names = strip_whitespace(species).split(",")
    if skip_empty:
        names = [name for name in names if name]
    return names
