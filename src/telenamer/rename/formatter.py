# python
"""
Utilities to build episode file names from a naming template.

Recognized placeholders:

- `{s}`  series name
- `{n}`  episode title
- `{e}`  episode number, `{0e}` zero-padded to two digits
- `{z}`  season number, `{0z}` zero-padded to two digits

Notes:
- Substitution is plain text replacement in a single pass, not a templating
  language. Substituted values are never expanded again, and any text that is
  not a placeholder is kept exactly as written.
- Characters that are invalid in portable file names are removed after
  substitution, so they never reach the filesystem, while the episode title
  held in memory is left untouched.
- The original container is appended with a literal dot.

Example:
    new_file_name(identity, "{s} - S{0z}E{0e} - {n}")
        -> "The Good Place - S05E01 - Backstreet's Back.mp4"
"""
import re

from telenamer.rename.models import EnrichedIdentity, RenameOp
from telenamer.utils.constants import DEFAULT_FORMAT
from telenamer.utils.file_util import sanitize_filename

_PLACEHOLDER_REGEX = re.compile(r"\{(?:s|n|e|0e|z|0z)\}")


def _placeholders(identity: EnrichedIdentity) -> dict[str, str]:
    return {
        "{s}": identity.series,
        "{n}": identity.episode_title,
        "{e}": str(identity.episode),
        "{0e}": f"{identity.episode:02d}",
        "{z}": str(identity.season),
        "{0z}": f"{identity.season:02d}",
    }


def new_file_name(identity: EnrichedIdentity, template: str = DEFAULT_FORMAT) -> str:
    """
    Expand `template` for `identity` and return a filesystem-safe file name.

    Parameters:
    - identity (EnrichedIdentity): Confirmed series/episode information.
    - template (str): Naming template containing zero or more placeholders.

    Returns:
    - str: Sanitized name with the identity's container appended.
    """
    values = _placeholders(identity)
    name = _PLACEHOLDER_REGEX.sub(lambda match: values[match.group(0)], template)
    return f"{sanitize_filename(name)}.{identity.container}"


def build_rename(identity: EnrichedIdentity, template: str = DEFAULT_FORMAT) -> RenameOp:
    """Pair the identity's current file name with its templated target name."""
    return RenameOp(source=identity.file_name, target=new_file_name(identity, template))
