"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Envelope keys as they appear on the wire.
COMMAND = "command"
DATA = "data"
MESSAGE_ID = "messageId"

# Detail keys of a web channel custom event.
DETAIL_ID = "id"
DETAIL_MESSAGE = "message"

# Event raised by every receiver for each decoded inbound message.
MESSAGE = "message"

# Host-level custom event names used by the web channel transport.
TO_CHROME = "WebChannelMessageToChrome"
TO_CONTENT = "WebChannelMessageToContent"

# Error codes carried by channel exceptions.
RESPONSE_TIMEOUT = "RESPONSE_TIMEOUT"
CHANNEL_TORN_DOWN = "CHANNEL_TORN_DOWN"
CHANNEL_NOT_READY = "CHANNEL_NOT_READY"

DEFAULT_SEND_TIMEOUT = 90.0
DEFAULT_CHANNEL_ID = "account_updates"
