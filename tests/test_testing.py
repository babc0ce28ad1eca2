"""Tests for injecting doubles into services under test."""

from __future__ import annotations

from unittest import mock

import pytest

from uses import InjectionError, Service
from uses.testing import inject_double, inject_mock


class Mailer:
    def send(self, to: str) -> str:
        return f"sent to {to}"


def test_injects_double_under_default_name() -> None:
    class Signup(Service):
        pass

    Signup.uses(Mailer)
    subject = Signup()
    double = object()

    assert inject_double(subject, {Mailer: double}) is double
    assert subject.mailer is double


def test_injects_double_under_overridden_name() -> None:
    class Newsletter(Service):
        pass

    Newsletter.uses(Mailer, name="some_object")
    subject = Newsletter()
    double = object()

    inject_double(subject, {Mailer: double})

    assert subject.some_object is double


def test_injects_into_subclass_instances() -> None:
    class Notifier(Service):
        pass

    class SmsNotifier(Notifier):
        pass

    Notifier.uses(Mailer)
    subject = SmsNotifier()
    double = object()

    inject_double(subject, {Mailer: double})

    assert subject.mailer is double


def test_requires_exactly_one_injection() -> None:
    class Digest(Service):
        pass

    with pytest.raises(InjectionError, match="expected a single key/value.*got 2"):
        inject_double(Digest(), {Mailer: object(), str: object()})


def test_rejects_undeclared_dependency() -> None:
    class Reminder(Service):
        pass

    with pytest.raises(InjectionError, match="does not depend on a Mailer"):
        inject_double(Reminder(), {Mailer: object()})


def test_rejects_non_service_subject() -> None:
    with pytest.raises(InjectionError, match="str is not a uses.Service"):
        inject_double("foo", {object: "blah"})  # type: ignore[arg-type]


def test_rejects_non_class_key() -> None:
    class Invite(Service):
        pass

    with pytest.raises(InjectionError, match="Pass the actual class, not a str"):
        inject_double(Invite(), {"Mailer": object()})  # type: ignore[dict-item]


def test_inject_mock_uses_autospec() -> None:
    class Welcome(Service):
        pass

    Welcome.uses(Mailer)
    subject = Welcome()

    double = inject_mock(subject, Mailer)

    assert subject.mailer is double
    assert isinstance(double, mock.NonCallableMagicMock)
    subject.mailer.send("ada@example.com")
    double.send.assert_called_once_with("ada@example.com")
    with pytest.raises(TypeError):
        double.send()
