from enum import Enum
from typing import ClassVar


class MessageKey(str, Enum):
    INPUT_TEXT = "inputText"
    ERROR_PROCESSING = "errorProcessing"
    PARSE_SUCCESS = "parseSuccess"
    PARSE_FAILED = "parseFailed"
    NO_QR_DATA = "noQRData"
    DOWNLOAD_ERROR = "downloadError"
    NO_FIELDS_SELECTED = "noFieldsSelected"


class Translator:
    """Resolves message keys against a fixed per-locale bundle.

    Unknown locales fall back to the default locale; a key missing from the
    bundle resolves to the key itself.
    """

    MESSAGES: ClassVar[dict[str, dict[str, str]]] = {
        "zh-CN": {
            "inputText": "附件字段",
            "errorProcessing": "处理失败，请重试",
            "parseSuccess": "二维码扫描成功",
            "parseFailed": "二维码扫描失败",
            "noQRData": "未找到二维码",
            "downloadError": "下载附件失败",
            "noFieldsSelected": "请至少选择一个附件字段",
        },
        "en-US": {
            "inputText": "Attachment Field",
            "errorProcessing": "Processing failed, please try again",
            "parseSuccess": "QR code scan successful",
            "parseFailed": "QR code scan failed",
            "noQRData": "No QR code found",
            "downloadError": "Failed to download attachment",
            "noFieldsSelected": "Please select at least one attachment field",
        },
        "ja-JP": {
            "inputText": "添付フィールド",
            "errorProcessing": "処理に失敗しました。もう一度お試しください",
            "parseSuccess": "QRコードスキャン成功",
            "parseFailed": "QRコードスキャン失敗",
            "noQRData": "QRコードが見つかりません",
            "downloadError": "添付ファイルのダウンロードに失敗しました",
            "noFieldsSelected": "少なくとも1つの添付フィールドを選択してください",
        },
    }

    def __init__(self, default_locale: str = "en-US") -> None:
        if default_locale not in self.MESSAGES:
            raise ValueError(
                f"Unknown default locale '{default_locale}'. "
                f"Choose from: {list(self.MESSAGES)}"
            )
        self._default_locale = default_locale

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def resolve_locale(self, locale: str | None) -> str:
        if locale and locale in self.MESSAGES:
            return locale
        return self._default_locale

    def t(self, key: MessageKey | str, locale: str | None = None) -> str:
        """Translate a message key for the given locale."""
        name = key.value if isinstance(key, MessageKey) else key
        bundle = self.MESSAGES[self.resolve_locale(locale)]
        return bundle.get(name, name)

    @classmethod
    def bundle(cls) -> dict[str, dict[str, str]]:
        """Return a copy of all messages, keyed by locale."""
        return {locale: dict(messages) for locale, messages in cls.MESSAGES.items()}
