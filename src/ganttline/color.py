# SPDX-License-Identifier: MIT

# Bar fill when no color attribute is configured or it resolves empty
DEFAULT_BAR_COLOR = "#1890ff"

# Bar label fills, light inside the bar and dark when placed above it
LABEL_INSIDE_COLOR = "#fff"
LABEL_ABOVE_COLOR = "#333"

# Terminal styles for the reference renderer
GROUP_ROW_STYLE = "bold #1890ff on #e6f7ff"
CHILD_ROW_STYLE = "#595959"
AXIS_STYLE = "dim"
