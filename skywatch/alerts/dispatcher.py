"""Notification dispatcher: native notification when permitted, toast otherwise."""

import logging
from typing import Protocol

from skywatch.alerts.settings import AlertFlags
from skywatch.config.schema import AlertRulesConfig
from skywatch.models.alert import (
    AlertDecision,
    AlertSettings,
    DeliveryOutcome,
    PermissionState,
    Toast,
    ToastAction,
)

logger = logging.getLogger(__name__)


class NotificationPlatform(Protocol):
    @property
    def supported(self) -> bool: ...

    def permission(self) -> PermissionState: ...

    def request_permission(self) -> PermissionState: ...

    def send(self, title: str, body: str, tag: str) -> None: ...


class ToastSink(Protocol):
    def show(self, toast: Toast) -> None: ...


class UnsupportedPlatform:
    """Platform without native notifications; everything goes to toasts."""

    supported = False

    def permission(self) -> PermissionState:
        return PermissionState.DEFAULT

    def request_permission(self) -> PermissionState:
        return PermissionState.DEFAULT

    def send(self, title: str, body: str, tag: str) -> None:
        raise RuntimeError("Native notifications are not supported")


class ConsoleToastSink:
    """Prints toasts to stdout."""

    def show(self, toast: Toast) -> None:
        print(f"[{toast.title}] {toast.body}")
        if toast.actions:
            labels = " / ".join(a.label for a in toast.actions)
            print(f"  ({labels})")


class NotificationDispatcher:
    def __init__(
        self,
        flags: AlertFlags,
        platform: NotificationPlatform,
        toasts: ToastSink | None,
        config: AlertRulesConfig | None = None,
    ):
        self.flags = flags
        self.platform = platform
        self.toasts = toasts
        self.config = config or AlertRulesConfig()

    def settings(self) -> AlertSettings:
        return AlertSettings(
            alerts_enabled=self.flags.enabled,
            alerts_prompted_once=self.flags.prompted,
            permission=self._permission(),
        )

    def notify(self, decision: AlertDecision) -> DeliveryOutcome:
        if (
            self.flags.enabled
            and self.platform.supported
            and self._permission() == PermissionState.GRANTED
        ):
            try:
                self.platform.send(decision.title, decision.body, decision.dedup_key.tag)
                return DeliveryOutcome.DELIVERED_NATIVE
            except Exception:
                logger.warning(
                    "Native notification failed for %s, falling back to toast",
                    decision.dedup_key.tag,
                    exc_info=True,
                )
        return self._toast(decision.title, decision.body)

    def request_enable(self) -> bool:
        """Turn alerts on, asking the platform for permission when needed."""
        if not self.platform.supported:
            self.flags.enabled = True
            self._toast(
                "Alerts enabled",
                "Native notifications are not supported here, "
                "so alerts will show as in-app toasts.",
            )
            return False

        permission = self._permission()
        if permission == PermissionState.GRANTED:
            self.flags.enabled = True
            self._toast("Alerts enabled", "Weather alerts are now active.")
            return True

        if permission == PermissionState.DENIED:
            self.flags.enabled = False
            self._toast(
                "Permission blocked",
                "Notifications are blocked in system settings. "
                "Enable them to receive alerts.",
            )
            return False

        result = self.platform.request_permission()
        if result == PermissionState.GRANTED:
            self.flags.enabled = True
            self._toast("Alerts enabled", "Weather alerts are now active.")
            return True

        self.flags.enabled = False
        self._toast("Not enabled", "Notification permission was not granted.")
        return False

    def disable(self) -> None:
        self.flags.enabled = False
        self._toast("Alerts disabled", "Weather alerts have been turned off.")

    def maybe_prompt_once(self) -> bool:
        """Offer to enable alerts on first run only. Returns True if the prompt was shown."""
        if self.flags.prompted:
            return False
        self.flags.mark_prompted()
        self._toast(
            "Enable weather alerts?",
            "Get rain alerts, extreme temperature warnings, and storm "
            "notifications for the selected city.",
            actions=(
                ToastAction("Enable", primary=True, on_click=self.request_enable),
                ToastAction("Not now"),
            ),
        )
        return True

    def _permission(self) -> PermissionState:
        if not self.platform.supported:
            return PermissionState.DEFAULT
        return self.platform.permission()

    def _toast(
        self, title: str, body: str, actions: tuple[ToastAction, ...] = ()
    ) -> DeliveryOutcome:
        if self.toasts is None:
            logger.info("No toast sink attached, suppressed: %s", title)
            return DeliveryOutcome.SUPPRESSED
        ttl = None if actions else self.config.toast_ttl_seconds
        self.toasts.show(Toast(title=title, body=body, actions=actions, ttl_seconds=ttl))
        return DeliveryOutcome.DELIVERED_TOAST
