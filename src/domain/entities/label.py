"""Reply label enumeration."""

from enum import Enum


class Label(Enum):
    """Quality tag a participant attaches to a reply.

    EXEMPLARY: the reply mattered to the labeler; shown on the author's profile.
    HELPFUL: the labeler found the reply helpful.
    MALICE: the labeler found the reply malicious; the author's replies in the
        conversation go to review.
    """

    EXEMPLARY = "exemplary"
    HELPFUL = "helpful"
    MALICE = "malice"
