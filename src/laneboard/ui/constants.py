"""Icons and labels shared by UI widgets."""

ICON_INFO = "📝"
ICON_DELETE = "🗑"
ICON_IMPORT = "📂"
ICON_EXPORT = "💾"
ICON_ADD = "+"
