"""Identity of the user running the launcher."""

from __future__ import annotations

import logging
import os
import pwd

from launchkit.cli.exit_codes import LOCAL_ENVIRONMENTAL_ERROR
from launchkit.diagnostics import fail

log = logging.getLogger(__name__)


def current_user_name() -> str:
    """
    Return the login name of the invoking user.

    ``$USER`` wins when it is set and non-empty; otherwise the real user ID is
    looked up in the account database.

    Returns:
        str: The user name.

    Raises:
        FatalError: If neither source yields a name.
    """
    user = os.environ.get("USER")
    if user:
        return user

    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError:
        entry = None
    if entry is None or not entry.pw_name:
        fail(
            LOCAL_ENVIRONMENTAL_ERROR,
            "$USER is not set, and unable to look up name of current user",
        )
    log.debug("Resolved user name %r from the account database", entry.pw_name)
    return entry.pw_name
