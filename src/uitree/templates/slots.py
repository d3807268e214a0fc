"""
Slot filling for cloned template bodies.

A slot is a ``template-child`` element inside a template body. When the
expansion supplies a fragment for the slot's id, the slot is replaced by a
clone of that fragment. Element children declared inside the slot act as
fallbacks: each is appended to the fragment unless the fragment already
contains an element with the same tag.
"""

from uitree.core.types import ChildLookup
from uitree.exceptions import ErrorContext, MissingSlotError
from uitree.parsing.elements import Element, clone, element_children

SLOT_TAG = "template-child"


def fill_slot(slot: Element, fragment: Element) -> Element:
    """
    Build the replacement for a slot from a caller-supplied fragment.

    Params:
        slot: The 'template-child' element, whose children are fallbacks
        fragment: The fragment supplied for the slot, left unmodified

    Returns:
        A clone of the fragment with missing fallback children appended
    """
    filled = clone(fragment)
    for fallback in element_children(slot):
        if next(filled.iterdescendants(fallback.tag), None) is None:
            filled.append(fallback)
    filled.tail = slot.tail
    return filled


def expand_children(
    template: Element,
    lookup: ChildLookup,
    strict: bool = False,
    template_name: str | None = None,
    filling: frozenset[str] = frozenset(),
) -> None:
    """
    Replace every supplied slot below a template element, depth-first.

    Unsupplied slots are left in place unless `strict` is set. After a slot
    is replaced the walk continues into the replacement. A slot inside the
    replacement for a slot with the same id is treated as unsupplied, so a
    fragment that passes its own slot through is not filled again.

    Params:
        template: Cloned template element, modified in place
        lookup: Child slot lookup of the active expansion
        strict: Raise for slots the lookup cannot supply
        template_name: Name of the template being expanded, for error context
        filling: Ids of the slots whose replacements enclose `template`

    Raises:
        MissingSlotError: If `strict` is set and a slot has no fragment
    """
    for child in element_children(template):
        enclosing = filling
        if child.tag == SLOT_TAG:
            slot_id = child.get("id", "")
            fragment = lookup(slot_id) if slot_id not in filling else None
            if fragment is not None:
                filled = fill_slot(child, fragment)
                template.replace(child, filled)
                child = filled
                enclosing = filling | {slot_id}
            elif strict:
                raise MissingSlotError(slot_id, ErrorContext.from_element(child, template_name))

        expand_children(child, lookup, strict, template_name, enclosing)
