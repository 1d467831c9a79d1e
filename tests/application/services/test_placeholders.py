from __future__ import annotations

from application.services.placeholders import PlaceholderRegistry


def test_replace_registered_tokens() -> None:
    registry = PlaceholderRegistry()
    registry.set("{id}", "42")
    registry.set("{name}", "bob")

    assert registry.replace("/users/{id}?name={name}&again={id}") == "/users/42?name=bob&again=42"


def test_remove_placeholder() -> None:
    registry = PlaceholderRegistry({"{id}": "42"})
    registry.remove("{id}")
    registry.remove("{missing}")

    assert registry.replace("/users/{id}") == "/users/{id}"


def test_replacement_runs_in_registration_order() -> None:
    registry = PlaceholderRegistry()
    registry.set("{a}", "{b}")
    registry.set("{b}", "x")

    assert registry.replace("{a}") == "x"
