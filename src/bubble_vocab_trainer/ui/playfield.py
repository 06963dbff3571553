from __future__ import annotations

import math
import time
from typing import Any

import altair as alt
import pandas as pd
import streamlit as st

from src.bubble_vocab_trainer.adapters.presenter_store import BubbleView, StorePresenter, bubble_views
from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.domain import DisplayMode, RoundPhase, label_for
from src.bubble_vocab_trainer.services import gameplay
from src.bubble_vocab_trainer.services.session_access import get_session, get_settings
from src.bubble_vocab_trainer.ui.audio_player import render_audio_requests

PICK_PARAM = "pick"
_COLUMNS = ["bubble_id", "cx", "cy", "area", "color", "stroke", "label", "opacity", "selectable"]


def _views_dataframe(views: list[BubbleView], mode: DisplayMode, now: float) -> pd.DataFrame:
    rows: list[dict[str, object]] = []
    for v in views:
        shaking = v.is_shaking(now)
        # 揺れ演出は表示位置だけを左右にずらす
        jitter = 4.0 * math.sin(now * 40.0) if shaking else 0.0
        # ポップ演出は 1.5 倍まで膨らみながら透明になる
        popping = v.is_popping(now)
        grow = 1.0 + 0.5 * v.pop_progress(now)
        rows.append(
            {
                "bubble_id": v.id,
                "cx": v.x + v.size / 2 + jitter,
                "cy": v.y + v.size / 2,
                "area": math.pi * (v.size * grow / 2) ** 2,
                "color": v.color,
                "stroke": "#FF4B4B" if shaking else "#FFFFFF",
                "label": label_for(v.word, mode),
                "opacity": 0.9 * (1.0 - v.pop_progress(now)),
                "selectable": not popping,
            }
        )
    return pd.DataFrame(rows, columns=_COLUMNS)


def build_playfield_chart(
    views: list[BubbleView], mode: DisplayMode, width: float, height: float, now: float
) -> alt.LayerChart:
    """バブルを円＋ラベルで描く。最前面の透明な円でクリックを拾う（ポップ中のバブルは拾わない）。"""
    df = _views_dataframe(views, mode, now)
    x = alt.X("cx:Q", scale=alt.Scale(domain=[0, width]), axis=None)
    y = alt.Y("cy:Q", scale=alt.Scale(domain=[0, height], reverse=True), axis=None)
    size = alt.Size("area:Q", scale=None, legend=None)

    circles = (
        alt.Chart(df)
        .mark_circle(strokeWidth=3)
        .encode(
            x=x,
            y=y,
            size=size,
            opacity=alt.Opacity("opacity:Q", scale=None, legend=None),
            color=alt.Color("color:N", scale=None, legend=None),
            stroke=alt.Stroke("stroke:N", scale=None, legend=None),
        )
    )
    labels = (
        alt.Chart(df)
        .mark_text(fontSize=18, fontWeight="bold", color="#31333F")
        .encode(x=x, y=y, text="label:N", opacity=alt.Opacity("opacity:Q", scale=None, legend=None))
    )
    pick = alt.selection_point(name=PICK_PARAM, fields=["bubble_id"], on="click", empty=False)
    selectors = (
        alt.Chart(df[df["selectable"].astype(bool)])
        .mark_circle(color="#000000", opacity=0.001, cursor="pointer")
        .encode(x=x, y=y, size=size)
        .add_params(pick)
    )
    return (
        alt.layer(circles, labels, selectors)
        .properties(width=int(width), height=int(height))
        .configure_view(strokeWidth=0)
    )


def picked_bubble_id(event: Any) -> int | None:  # noqa: ANN401 - Streamlit の戻り値
    """altair_chart の選択イベントからクリックされたバブル id を取り出す。"""
    if not isinstance(event, dict):
        return None
    picked = (event.get("selection") or {}).get(PICK_PARAM)
    if isinstance(picked, list):
        picked = picked[0] if picked else None
    if not isinstance(picked, dict):
        return None
    value = picked.get("bubble_id")
    if isinstance(value, list):
        value = value[0] if value else None
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def render_playfield(store: StSessionStore, presenter: StorePresenter) -> None:
    """プレイフィールドを描画する。

    - フラグメントを一定間隔で再実行し、そのたびに tick() でバブルを進める。
    - クリックはチャートの選択イベントで受け取り、サービスに委譲する。
    """
    interval = 1.0 / max(1, get_settings(store).fps)

    @st.fragment(run_every=interval)
    def _playfield() -> None:
        session = get_session(store)
        gameplay.tick(session, presenter)

        speech_slot = st.empty()
        tone_slot = st.empty()
        render_audio_requests(speech_slot, tone_slot, store)

        st.metric("のこり", int(store.get("remaining_count") or 0))
        chart = build_playfield_chart(
            bubble_views(store), session.mode, session.width, session.height, time.time()
        )
        pick_round = int(store.setdefault("pick_round", 0))
        event = st.altair_chart(
            chart,
            on_select="rerun",
            selection_mode=PICK_PARAM,
            key=f"playfield-{pick_round}",
            use_container_width=False,
        )
        bubble_id = picked_bubble_id(event)
        if bubble_id is None:
            return
        # 同じ選択を次の再実行で二重に処理しないよう、チャートを作り直す
        store.set("pick_round", pick_round + 1)
        gameplay.handle_bubble_click(session, bubble_id, presenter)
        if session.phase is RoundPhase.ROUND_COMPLETE:
            st.rerun()
        st.rerun(scope="fragment")

    _playfield()
