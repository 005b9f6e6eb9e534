from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, ClassVar


@dataclass(frozen=True)
class FieldContext:
    """Tracing identifiers the host passes with every invocation.

    Used for diagnostics only; none of these values change behaviour except
    ``locale``, which picks the message language.
    """

    log_id: str = ""
    pack_id: str = ""
    tenant_key: str = ""
    base_id: str = ""
    table_id: str = ""
    base_owner_id: str = ""
    time_zone: str = ""
    is_need_pay_pack: bool | None = None
    has_quota: bool | None = None
    base_signature: str = ""
    locale: str | None = None

    HOST_KEYS: ClassVar[dict[str, str]] = {
        "logID": "log_id",
        "packID": "pack_id",
        "tenantKey": "tenant_key",
        "baseID": "base_id",
        "tableID": "table_id",
        "baseOwnerID": "base_owner_id",
        "timeZone": "time_zone",
        "isNeedPayPack": "is_need_pay_pack",
        "hasQuota": "has_quota",
        "baseSignature": "base_signature",
        "locale": "locale",
    }

    @classmethod
    def from_host(cls, raw: Any) -> "FieldContext":
        """Build a context from the host's context mapping or object.

        Reads camelCase or snake_case keys from a mapping, or the same names as
        attributes from any other object; unknown names are ignored.
        """
        if isinstance(raw, FieldContext):
            return raw
        if raw is None:
            return cls()
        known = {f.name for f in fields(cls)}
        if isinstance(raw, Mapping):
            items = list(raw.items())
        else:
            names = [*cls.HOST_KEYS, *known]
            items = [(name, getattr(raw, name, None)) for name in names]
        values: dict[str, Any] = {}
        for key, value in items:
            name = cls.HOST_KEYS.get(key, key)
            if name in known and value is not None:
                values[name] = value
        return cls(**values)


def _render(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_context(ctx: FieldContext | None) -> str:
    """Render tracing identifiers as ``[logID=...] [packID=...] ...`` for log lines."""
    ctx = ctx or FieldContext()
    pairs = [
        ("logID", ctx.log_id),
        ("packID", ctx.pack_id),
        ("tenantKey", ctx.tenant_key),
        ("baseID", ctx.base_id),
        ("tableID", ctx.table_id),
        ("baseOwnerID", ctx.base_owner_id),
        ("timeZone", ctx.time_zone),
        ("isNeedPayPack", ctx.is_need_pay_pack),
        ("hasQuota", ctx.has_quota),
        ("baseSignature", ctx.base_signature),
    ]
    return " ".join(f"[{key}={_render(value)}]" for key, value in pairs)
