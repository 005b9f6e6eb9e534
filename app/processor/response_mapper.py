from app.i18n.messages import MessageKey, Translator
from app.processor.models import (
    DecodeOutcome,
    FieldCode,
    FieldResponse,
    Found,
    MissingSelection,
    NotFound,
    Stage,
    StageError,
    Unhandled,
    UnresolvableUrl,
)


class ResponseMapper:
    """Converts pipeline outcomes into localized host responses.

    Every outcome maps to ``FieldCode.SUCCESS``; callers tell results apart by
    ``data``/``msg`` or by the structured ``outcome`` on the response.
    """

    def __init__(self, translator: Translator) -> None:
        self._translator = translator

    def map(self, outcome: DecodeOutcome, locale: str | None = None) -> FieldResponse:
        if isinstance(outcome, Found):
            return FieldResponse(
                code=FieldCode.SUCCESS,
                data=outcome.text,
                msg=self._t(MessageKey.PARSE_SUCCESS, locale),
                outcome=outcome,
            )
        message = self._message_for(outcome, locale)
        return FieldResponse(code=FieldCode.SUCCESS, data=message, msg=message, outcome=outcome)

    def _message_for(self, outcome: DecodeOutcome, locale: str | None) -> str:
        if isinstance(outcome, NotFound):
            return self._t(MessageKey.NO_QR_DATA, locale)
        if isinstance(outcome, MissingSelection):
            return self._t(MessageKey.NO_FIELDS_SELECTED, locale)
        if isinstance(outcome, UnresolvableUrl):
            return self._t(MessageKey.DOWNLOAD_ERROR, locale)
        if isinstance(outcome, StageError):
            if outcome.stage is Stage.DOWNLOAD and outcome.status_code is not None:
                return f"{self._t(MessageKey.DOWNLOAD_ERROR, locale)} ({outcome.status_code})"
            return f"{self._t(MessageKey.PARSE_FAILED, locale)} - {outcome.detail}"
        if isinstance(outcome, Unhandled):
            return f"{self._t(MessageKey.PARSE_FAILED, locale)}：{outcome.detail}"
        raise TypeError(f"Unknown outcome: {outcome!r}")

    def _t(self, key: MessageKey, locale: str | None) -> str:
        return self._translator.t(key, locale)
