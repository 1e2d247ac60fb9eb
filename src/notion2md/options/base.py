#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/options/base.py
"""Base classes for notion2md options.

Every options class is a frozen dataclass. Derived copies are made with
``create_updated`` so that an options object handed to an exporter can never
change under it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from notion2md.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes support for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with some fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            The updated copy; ``self`` is unchanged

        Raises
        ------
        ValidationError
            If a keyword is not a field of this options class

        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValidationError(
                f"{type(self).__name__} has no option(s) {', '.join(unknown)}; "
                f"valid options: {', '.join(sorted(known))}",
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options shared by all renderers.

    Format-specific renderers subclass this with their own fields.
    """
