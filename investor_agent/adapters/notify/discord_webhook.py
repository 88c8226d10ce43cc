"""Discord webhook notifier — implements NotificationPort."""

import sys
from datetime import datetime, timezone

import aiohttp


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordWebhookNotifier:
    """Posts proposals to a Discord channel as an embed.

    Delivery failures are logged, never raised: a notification problem must
    not stop the investor loop.
    """

    def __init__(self, webhook_url: str, username: str = "Investor Agent"):
        self.webhook_url = webhook_url
        self.username = username

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    def build_payload(self, text: str) -> dict:
        embed = {
            "title": "Swap proposal",
            "description": text,
            "color": 10181046,  # Purple (#9B59B6)
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "footer": {"text": "Proposal only - no trade was executed"},
        }
        return {"username": self.username, "embeds": [embed]}

    async def send(self, text: str) -> None:
        if not self.is_configured:
            return

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(self.webhook_url, json=self.build_payload(text)) as response:
                    if response.status in (200, 204):
                        _log("Discord notification sent")
                    else:
                        _log(f"Discord webhook returned status {response.status}")
        except Exception as e:
            _log(f"Failed to send Discord notification: {e}")
