"""End-to-end flows: a producer returns a Channel, consumers fold or forward it."""

from __future__ import annotations

from datachannel import Channel, Failure, Optional, Present, Success

from .helpers import NetworkError, Profile, User, UserFacingError


def fetch_user(user_id: str, *, fail_with: str | None = None) -> Channel[NetworkError, User]:
    if fail_with is not None:
        return Channel.from_error(NetworkError(fail_with))
    return Channel.from_value(User(user_id, "Alice"))


def get_profile(user_id: str, *, fail_with: str | None = None) -> Channel[NetworkError, Profile]:
    user = fetch_user(user_id, fail_with=fail_with)
    return user.forward_or_else(lambda payload: payload.map(lambda u: Profile(u.id, u.name)))


class TestLiteralScenarios:
    def test_present_map_unwrap_or(self) -> None:
        assert Optional.present(5).map(lambda x: x * 2).unwrap_or(0) == 10

    def test_absent_map_unwrap_or_never_maps(self, probe) -> None:
        double = probe(lambda x: x * 2)

        assert Optional.absent().map(double).unwrap_or(0) == 0
        assert double.count == 0

    def test_forward_or_else_to_string(self) -> None:
        result = Channel.from_value(5).forward_or_else(lambda o: o.map(lambda x: str(x)))

        assert result == Success(Present("5"))

    def test_forward_or_else_on_failure(self, probe) -> None:
        builder = probe(lambda o: o.map(lambda x: str(x)))

        result = Channel.from_error("boom").forward_or_else(builder)

        assert result == Failure("boom")
        assert builder.count == 0

    def test_forward_or_else_filters_unverified_user(self) -> None:
        result = Channel.from_value(User("1", "Bob", verified=False)).forward_or_else(
            lambda o: o.filter(lambda u: u.verified)
        )

        assert result == Channel.empty()

    def test_map_error_then_fold(self) -> None:
        result = (
            Channel.from_error(404)
            .map_error(lambda e: "error:" + str(e))
            .fold(on_failure=lambda e: e, on_success=lambda _: "n/a")
        )

        assert result == "error:404"


class TestUserFlows:
    def test_success_flow_greets_user(self) -> None:
        greeting = fetch_user("456").fold(
            on_failure=lambda _: "Error loading user",
            on_success=lambda user: user.map(lambda u: f"Hello {u.name}!").unwrap_or("Hello stranger!"),
        )

        assert greeting == "Hello Alice!"

    def test_failure_flow_reports_error(self) -> None:
        messages: list[str] = []

        fetch_user("123", fail_with="API timeout").pick(
            on_error=lambda _: messages.append("Failed to load user"),
            on_data=lambda u: messages.append(f"Welcome {u.name}"),
        )

        assert messages == ["Failed to load user"]

    def test_user_forwarded_to_profile(self) -> None:
        assert get_profile("789") == Channel.from_value(Profile("789", "Alice"))

    def test_failure_forwarded_to_profile(self) -> None:
        assert get_profile("789", fail_with="502") == Failure(NetworkError("502"))

    def test_error_translated_for_ui(self) -> None:
        ui_text = (
            fetch_user("1", fail_with="502 Bad Gateway")
            .map_error(lambda _: UserFacingError("Service temporarily unavailable"))
            .fold(
                on_failure=lambda e: e.message,
                on_success=lambda user: user.map(lambda u: u.name).unwrap_or("Unknown"),
            )
        )

        assert ui_text == "Service temporarily unavailable"

    def test_multi_step_propagation_stops_at_failure(self, probe) -> None:
        save = probe(lambda payload: payload)

        result = (
            fetch_user("1", fail_with="down")
            .forward_with_value("ignored")
            .forward_with_absent()
            .forward_or_else(save)
        )

        assert result == Failure(NetworkError("down"))
        assert save.count == 0
