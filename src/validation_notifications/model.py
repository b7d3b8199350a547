"""Pydantic base model that carries its own notifications.

Provides NotifiableModel, a Pydantic base model that owns a Notifier so
entities can collect validation failures about themselves.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from validation_notifications.notification import Notification
from validation_notifications.notifier import Notifier
from validation_notifications.rules import ValidationRules
from validation_notifications.settings import RuleSettings

__all__ = ["NotifiableModel"]

ModelT = TypeVar("ModelT", bound="NotifiableModel")


class NotifiableModel(BaseModel):
    """Base model with a built-in notifier.

    All models inheriting from this class automatically get:
    - notifier: private Notifier (never serialized)
    - rules(): a fresh ValidationRules scoped to the model type
    - add_notification() / add_notifications(): record failures
    - has_notifications / notifications / notification_count
    - notification_log(): export entries for reporting
    - notification_log_recursive(): export entries including nested models
    - equality over fields and recorded notifications; copies get their own notifier

    Example:
        from validation_notifications import NotifiableModel

        class Customer(NotifiableModel):
            name: str
            email: str

            def validate_fields(self) -> bool:
                self.add_notifications(
                    self.rules()
                    .is_required("Name", self.name)
                    .is_email("Email", self.email)
                )
                return not self.has_notifications

        customer = Customer(name="", email="nope")
        customer.validate_fields()  # False
        print(customer.notification_log())
    """

    model_config = ConfigDict(
        # Subclasses can override this
        extra="ignore",
    )

    _notifier: Notifier = PrivateAttr(default_factory=Notifier)

    def __copy__(self: ModelT) -> ModelT:
        """Shallow copy with its own notifier, so the copy records separately.

        Pydantic copies private attributes by reference; model_copy() goes
        through here and through Notifier.__deepcopy__ for deep copies.
        """
        copied = super().__copy__()
        copied._notifier = self._notifier.copy()
        return copied

    @property
    def notifier(self) -> Notifier:
        """The notifier owned by this model."""
        return self._notifier

    @property
    def has_notifications(self) -> bool:
        """Check if any notification has been recorded."""
        return self._notifier.has_notifications

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """Read-only ordered view of the recorded notifications."""
        return self._notifier.notifications

    @property
    def notification_count(self) -> int:
        """Get the number of recorded notifications."""
        return self._notifier.notification_count

    def rules(self: ModelT, settings: RuleSettings | None = None) -> ValidationRules[ModelT]:
        """Start a validation pass for this model.

        The returned rules are independent of the model's notifier; merge
        them back with add_notifications().

        Args:
            settings: Rule settings. Defaults to RuleSettings().
        """
        return ValidationRules[ModelT](settings=settings)

    def add_notification(
        self,
        notification: Notification | str,
        *args: object,
        key: str | None = None,
    ) -> None:
        """Record a notification on this model. See Notifier.add_notification."""
        self._notifier.add_notification(notification, *args, key=key)

    def add_notifications(self, source: Notifier | Iterable[Notification]) -> None:
        """Merge notifications from a validation pass into this model."""
        self._notifier.add_notifications(source)

    def clear_notifications(self) -> None:
        """Clear all recorded notifications. Useful for revalidating."""
        self._notifier.clear_notifications()

    def notification_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export notifications as dicts, in recording order.

        Args:
            source: Optional source identifier added to each entry.

        Returns:
            List of dicts with ``key`` and ``message`` (and ``source``).
        """
        entries: list[dict[str, Any]] = []
        for notification in self._notifier.notifications:
            d: dict[str, Any] = notification.to_dict()
            if source:
                d["source"] = source
            entries.append(d)
        return entries

    def notification_log_recursive(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export notifications from this model and all nested models.

        Traverses nested NotifiableModel fields, including lists of them,
        and labels their entries with a dotted source path.

        Args:
            source: Optional source identifier prefix.

        Returns:
            Entries of this model first, then nested models in field order.

        Example:
            class Address(NotifiableModel):
                city: str

            class Person(NotifiableModel):
                name: str
                address: Address

            person = Person(name="John", address=Address(city=""))
            person.address.add_notification("The field 'City' is required", key="City")

            person.notification_log_recursive(source="signup")
            # [{"key": "City", "message": "...", "source": "signup.address"}]
        """
        entries = self.notification_log(source=source)

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)

            if isinstance(value, NotifiableModel):
                nested_source = f"{source}.{field_name}" if source else field_name
                entries.extend(value.notification_log_recursive(source=nested_source))

            elif isinstance(value, list):
                for i, item in enumerate(value):
                    if isinstance(item, NotifiableModel):
                        nested_source = (
                            f"{source}.{field_name}[{i}]" if source else f"{field_name}[{i}]"
                        )
                        entries.extend(item.notification_log_recursive(source=nested_source))

        return entries
