# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Speaker roles and the role-to-profile mapping.

Every turn carries exactly one `SpeakerRole`. The extended `Profile` tells
whether a turn belongs to the real two-way conversation (interactive) or to
ambient/system audio such as ringing, hold music and IVR menus.

The mapping in this module is the only place that decides what counts as
"interactive". Pre-call detection and the scoring filter both rely on it.
"""

from enum import Enum


class SpeakerRole(str, Enum):
    """Who produced a turn."""

    AGENT = "AGENT"
    USER = "USER"
    SYSTEM = "SYSTEM"


class BaseRole(str, Enum):
    """Conversation side used for layout and colouring."""

    AGENT = "agent"
    USER = "user"


class Profile(str, Enum):
    """Detailed speaker profile.

    `AGENT` and `CUSTOMER` are interactive. All other values describe audio that
    precedes or interrupts the actual conversation and is excluded from scoring.
    """

    AGENT = "agent"
    CUSTOMER = "customer"
    IVR = "ivr"
    SYSTEM = "system"
    HOLD = "hold"
    WAITING = "waiting"
    NOISE = "noise"
    PEER_AGENT = "peerAgent"
    SUPERVISOR = "supervisor"
    OTHER = "other"


_INTERACTIVE_PROFILES = frozenset({Profile.AGENT, Profile.CUSTOMER})

# System audio sits on the user side of the layout.
_ROLE_PROFILES: dict[SpeakerRole, tuple[Profile, BaseRole]] = {
    SpeakerRole.AGENT: (Profile.AGENT, BaseRole.AGENT),
    SpeakerRole.USER: (Profile.CUSTOMER, BaseRole.USER),
    SpeakerRole.SYSTEM: (Profile.SYSTEM, BaseRole.USER),
}


def role_profile(role: SpeakerRole) -> tuple[Profile, BaseRole]:
    """Return the `(profile, base_role)` pair for a speaker role."""

    return _ROLE_PROFILES[role]


def profile_for_role(role: SpeakerRole) -> Profile:
    return _ROLE_PROFILES[role][0]


def base_role_for_role(role: SpeakerRole) -> BaseRole:
    return _ROLE_PROFILES[role][1]


def is_interactive_profile(profile: Profile) -> bool:
    """Return True for profiles that take part in the human conversation."""

    return profile in _INTERACTIVE_PROFILES


def is_pre_call_profile(profile: Profile) -> bool:
    """Return True for profiles that are excluded from scoring."""

    return not is_interactive_profile(profile)
