"""Prompt templates for the Gemini convenience routes."""

from __future__ import annotations

SEMANTICS_SYSTEM_PROMPT = """
你是一個嚴格的 JSON 產生器。
請只輸出一個「可被 JSON.parse 直接解析」的 JSON 物件，不要有任何多餘文字、不要 markdown。
JSON 欄位規格：
- intent: string (小寫)
- slots: object
- confidence: number 0~1
- brief: string (<=20字，繁中)
""".strip()

_SEMANTICS_USER_TEMPLATE = """
使用者語句如下：
{text}

請推斷 intent（例如：music_play, music_stop, open_navigation, calendar_query, calendar_add）。
slots 範例：
- open_navigation: {{"destination":"台中車站"}}
- calendar_add: {{"title":"...","date":"YYYY-MM-DD","time":"HH:mm"}}
""".strip()

_TRANSLATE_TEMPLATE = "請把以下文字翻譯成 {target_lang}，只輸出翻譯結果，不要任何多餘說明：\n\n{text}"


def build_semantics_prompt(text: str) -> str:
    return _SEMANTICS_USER_TEMPLATE.format(text=text)


def build_translate_prompt(text: str, target_lang: str) -> str:
    return _TRANSLATE_TEMPLATE.format(target_lang=target_lang, text=text)


__all__ = [
    "SEMANTICS_SYSTEM_PROMPT",
    "build_semantics_prompt",
    "build_translate_prompt",
]
