"""Notification adapters."""

from investor_agent.adapters.notify.discord_webhook import DiscordWebhookNotifier

__all__ = ["DiscordWebhookNotifier"]
