"""Selection, archived badge and visibility controls for one grid product.

Shown over each product card of the catalog grid to users allowed to
create products.  The component is a pure function of its inputs: the
three predicates are evaluated on every render and never cached.
"""

from __future__ import annotations

from typing import Callable

from rich.text import Text

from storefront.domain.model.product import Product
from storefront.ui.elements import (
    Element,
    IconButton,
    Translate,
    Translation,
    default_translate,
    render_html,
    render_rich,
)

Predicate = Callable[[], bool]


class GridItemControls:

    def __init__(
        self,
        product: Product,
        checked: Predicate,
        has_changes: Predicate,
        has_create_product_permission: Predicate,
        translate: Translate | None = None,
    ) -> None:
        self.product = product
        self.checked = checked
        self.has_changes = has_changes
        self.has_create_product_permission = has_create_product_permission
        self.translate = translate or default_translate

    def render_archived(self) -> Element | None:
        if self.product.is_deleted:
            return Element(
                "span",
                {"class": "badge badge-danger"},
                (Translation(i18n_key="app.archived", default_value="Archived"),),
            )
        return None

    def render_visibility_button(self) -> Element | None:
        if self.has_changes():
            return Element("div", {}, (IconButton(icon="", on_icon="", status="info"),))
        return None

    def render(self) -> Element | None:
        """Build the controls, or None when the user may not edit products."""
        if not self.has_create_product_permission():
            return None

        select_id = f"select-product-{self.product.id}"
        checkbox = Element(
            "input",
            {
                "type": "checkbox",
                "name": "selectProduct",
                "value": self.product.id,
                "id": select_id,
                "checked": bool(self.checked()),
                "readonly": True,
            },
        )
        label = Element("label", {"class": "like-button hidden", "for": select_id}, (checkbox,))

        children = [label]
        for optional in (self.render_archived(), self.render_visibility_button()):
            if optional is not None:
                children.append(optional)
        return Element("div", {"class": "product-grid-controls"}, tuple(children))

    def to_html(self) -> str:
        element = self.render()
        return render_html(element, self.translate) if element is not None else ""

    def to_rich(self) -> Text | None:
        element = self.render()
        return render_rich(element, self.translate) if element is not None else None
