# Entry points for cog blocks inside swift sources, for example:
#
#     enum Destination: Hashable, Identifiable {
#         case destination(id: Int, a: String)
#
#         // [[[cog
#         //   from identable.generate import expand
#         //   from destinations import Destination
#         //   expand(Destination, indent=4)
#         // ]]]
#         // [[[end]]]
#     }
#
# Run through tools.run_cog (or `python -m identable FILE...`), which puts
# this package on cog's include path.

import textwrap

import cog

from .diagnostics import LoggingSink
from .identity import expand as expand_members
from .render import render_members


def expand(decl, *, config=None, indent=0):
    """Emits the identity members of a single enum declaration. The members
    belong inside the body of that enum, so every enum needs its own cog block.
    Declarations that are not enums or have no cases are logged and emit nothing."""

    members = expand_members(decl, LoggingSink(), config)
    if not members:
        return

    text = render_members(members)
    if indent:
        text = textwrap.indent(text, " " * indent)
    cog.outl(text)
