from dataclasses import dataclass, field
from enum import Enum

from app.i18n.messages import MessageKey, Translator


class FieldType(str, Enum):
    TEXT = "Text"
    ATTACHMENT = "Attachment"


class FieldComponent(str, Enum):
    FIELD_SELECT = "FieldSelect"


@dataclass(frozen=True)
class FormItem:
    key: str
    label: MessageKey
    component: FieldComponent
    support_type: tuple[FieldType, ...]
    mode: str = "single"
    required: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "key": self.key,
            "label": self.label.value,
            "component": self.component.value,
            "props": {
                "supportType": [t.value for t in self.support_type],
                "mode": self.mode,
            },
            "validator": {"required": self.required},
        }


@dataclass(frozen=True)
class FieldDefinition:
    """What the host needs to render the field and call it."""

    form_items: tuple[FormItem, ...]
    result_type: FieldType
    domains: tuple[str, ...] = ()
    messages: dict[str, dict[str, str]] = field(default_factory=Translator.bundle)

    def to_dict(self) -> dict[str, object]:
        return {
            "i18n": {"messages": self.messages},
            "formItems": [item.to_dict() for item in self.form_items],
            "resultType": {"type": self.result_type.value},
            "domains": list(self.domains),
        }


def qr_scan_definition(domains: tuple[str, ...] | list[str] = ("feishu.cn",)) -> FieldDefinition:
    return FieldDefinition(
        form_items=(
            FormItem(
                key="file",
                label=MessageKey.INPUT_TEXT,
                component=FieldComponent.FIELD_SELECT,
                support_type=(FieldType.ATTACHMENT,),
            ),
        ),
        result_type=FieldType.TEXT,
        domains=tuple(domains),
    )
