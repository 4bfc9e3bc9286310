"""Operator-facing adapters: the settings form and its trigger item."""

from itemgen.ui.forms import (
    DefaultValuesPresenter,
    FormPresenter,
    FormResponse,
    ModalForm,
    QueuedFormPresenter,
    TextField,
    apply_form_values,
    build_settings_form,
    handle_item_use,
    show_settings_form,
)

__all__ = [
    "TextField",
    "ModalForm",
    "FormResponse",
    "FormPresenter",
    "DefaultValuesPresenter",
    "QueuedFormPresenter",
    "build_settings_form",
    "apply_form_values",
    "show_settings_form",
    "handle_item_use",
]
