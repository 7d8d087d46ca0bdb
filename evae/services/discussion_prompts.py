# This project was developed with assistance from AI tools.
"""Prompt templates for discussion points.

Kept apart from the service so the wording can be reviewed on its own. The
model may only raise topics; it must never approve, deny, or quote figures.
"""

from typing import Any

SYSTEM_PROMPT = (
    "あなたは住宅ローン事前相談の論点整理アシスタントです。"
    "申込者のプロフィールから、相談時に確認すべき論点を最大4つ、"
    "1行1論点の箇条書き（先頭に「- 」）で日本語で出力してください。\n"
    "禁止事項:\n"
    "- 融資の可否・承認・否決・審査通過の見込みに関する表現\n"
    "- 金額・比率・金利・年数などの数値の断定\n"
    "- 箇条書き以外の前置きや結び"
)

_FIELD_LABELS: dict[str, str] = {
    "age": "年齢",
    "job": "職業",
    "family": "家族構成",
    "incomeMan": "年収（万円）",
    "assetsMan": "自己資金（万円）",
    "otherDebtMan": "他の借入残高（万円）",
    "loanRequestMan": "申込金額（万円）",
}


def build_discussion_prompt(profile: dict[str, Any]) -> list[dict[str, str]]:
    """Build chat messages from an applicant profile (camelCase keys)."""
    lines = []
    for key, label in _FIELD_LABELS.items():
        value = profile.get(key)
        lines.append(f"{label}: {value if value not in (None, '') else '未入力'}")

    user_content = "申込者プロフィール:\n" + "\n".join(lines)
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_content},
    ]
