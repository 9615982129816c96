"""Unit tests for Present/Absent gating and composition."""

from __future__ import annotations

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from mp_analytics.feature_flags import (
    Absent,
    FeatureName,
    FlagRegistry,
    Present,
    build_snapshot,
    compose,
    gate,
)

ON = build_snapshot({"ENABLE_LIVE_CHAT": "true"})
OFF = build_snapshot({})


def chat_widget(user: str, *, theme: str = "light") -> str:
    return f"<chat user={user} theme={theme}>"


class TestGate:
    def test_enabled_resolves_to_present(self) -> None:
        gated = gate(chat_widget, FeatureName.LIVE_CHAT, ON)
        assert isinstance(gated, Present)
        assert gated.is_present() is True
        assert gated.unit is chat_widget

    def test_disabled_resolves_to_absent(self) -> None:
        gated = gate(chat_widget, FeatureName.LIVE_CHAT, OFF)
        assert isinstance(gated, Absent)
        assert gated.is_present() is False

    def test_unknown_feature_resolves_to_absent(self) -> None:
        everything_on = build_snapshot({name.env_key: "true" for name in FeatureName})
        assert gate(chat_widget, "darkMode", everything_on) == Absent()

    def test_present_delegates_all_inputs(self) -> None:
        gated = gate(chat_widget, "liveChat", ON)
        assert gated.render("ana", theme="dark") == "<chat user=ana theme=dark>"
        assert gated("ana") == chat_widget("ana")

    def test_absent_renders_nothing(self) -> None:
        gated = gate(chat_widget, "liveChat", OFF)
        assert gated.render("ana", theme="dark") is None
        assert gated() is None

    def test_iteration(self) -> None:
        assert list(gate(chat_widget, "liveChat", ON)) == [chat_widget]
        assert list(gate(chat_widget, "liveChat", OFF)) == []

    def test_equality(self) -> None:
        assert Present(chat_widget) == Present(chat_widget)
        assert Absent() == Absent()
        assert Present(chat_widget) != Absent()

    @given(st.text(), st.text())
    def test_gate_law(self, user: str, theme: str) -> None:
        assert gate(chat_widget, "liveChat", OFF).render(user, theme=theme) is None
        assert gate(chat_widget, "liveChat", ON).render(user, theme=theme) == chat_widget(user, theme=theme)


class TestRegistryDecorator:
    def test_feature_decorator_gates(self) -> None:
        flags = FlagRegistry(ON)

        @flags.feature(FeatureName.LIVE_CHAT)
        def live_chat(user: str) -> str:
            return f"chat:{user}"

        @flags.feature(FeatureName.INVESTMENT_CALCULATOR)
        def calculator(user: str) -> str:
            return f"calc:{user}"

        assert live_chat.render("bo") == "chat:bo"
        assert calculator.render("bo") is None


class TestCompose:
    def test_skips_absent_units(self) -> None:
        flags = FlagRegistry.from_config(
            {"ENABLE_LIVE_CHAT": "true", "ENABLE_MARKET_INTELLIGENCE": "false"}
        )

        def market(**props: Any) -> str:
            return f"market:{props['user']}"

        def chat(**props: Any) -> str:
            return f"chat:{props['user']}"

        page = compose(
            flags.gate(market, FeatureName.MARKET_INTELLIGENCE),
            flags.gate(chat, FeatureName.LIVE_CHAT),
            user="cy",
        )
        assert page == ["chat:cy"]

    def test_nothing_enabled(self) -> None:
        assert compose(Absent(), Absent(), user="x") == []
