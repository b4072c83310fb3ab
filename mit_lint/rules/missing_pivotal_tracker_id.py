"""Pivotal Tracker ID check."""

from __future__ import annotations

from re import IGNORECASE, compile

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem
from mit_lint.rules.base import missing_pattern_problem

CONFIG = "pivotal-tracker-id-missing"
ERROR = "Your commit message is missing a Pivotal Tracker ID"
URL = "https://www.pivotaltracker.com/help/api?version=v5#Tracker_Updates_in_SCM_Post_Commit_Hooks"
HELP_MESSAGE = """\
It's important to add the ID because it allows code to be linked back to the stories it was \
done for, it can provide a chain of custody for code for audit purposes, and it can give \
future explorers of the codebase insight into the wider organisational need behind the \
change. We may also use it for automation purposes, like generating changelogs or \
notification emails.

You can fix this by adding the Id in one of the styles below to the commit message
[Delivers #12345678]
[fixes #12345678]
[finishes #12345678]
[#12345884 #12345678]
[#12345884,#12345678]
[#12345678],[#12345884]
This will address [#12345884]"""

RE = compile(
    r"\[(((finish|fix)(ed|es)?|complete[ds]?|deliver(s|ed)?) )?#\d+([, ]#\d+)*]",
    IGNORECASE,
)


def lint(commit: CommitMessage) -> Problem | None:
    return missing_pattern_problem(
        commit,
        RE,
        error=ERROR,
        tip=HELP_MESSAGE,
        code=Code.PIVOTAL_TRACKER_ID_MISSING,
        label="No Pivotal Tracker ID",
        url=URL,
    )
