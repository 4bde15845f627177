"""Generic template merge for spec nodes.

Used for sections with many sibling fields and no per-field rules. The
merge reads the declared fields of the node's model class, so new fields
are picked up without code changes here.
"""

from collections.abc import Callable
from typing import TypeVar

from pulsar_operator.crds._base import SpecModel
from pulsar_operator.exceptions import TemplateMismatchError

M = TypeVar("M", bound=SpecModel)


def apply_defaults_from_template(live: M, template_supplier: Callable[[], M]) -> None:
    """Copy template values into every absent field of ``live``.

    The merge is shallow. An absent nested section receives the template's
    section as a whole; a present nested section is left alone and must be
    merged by its own call.

    Args:
        live: Node to fill in place.
        template_supplier: Factory returning a new template of the same class.

    Raises:
        TemplateMismatchError: If the template is not exactly ``live``'s class.
    """
    template = template_supplier()
    if type(template) is not type(live):
        msg = (
            f"Template of type {type(template).__name__} cannot provide defaults "
            f"for {type(live).__name__}"
        )
        raise TemplateMismatchError(
            msg,
            live_type=type(live),
            template_type=type(template),
        )

    for name in type(live).model_fields:
        if getattr(live, name) is not None:
            continue
        default = getattr(template, name)
        if default is None:
            continue
        setattr(live, name, default)
        live.mark_defaulted(name)
