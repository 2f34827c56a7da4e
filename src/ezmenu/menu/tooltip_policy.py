# ---------------------------------------------------------------------------
# File: tooltip_policy.py
# ---------------------------------------------------------------------------
# Description:
#	Decide which text (if any) to show after a menu selection.
#
# Notes:
#	Precedence is strict, first match wins:
#		1) callable policy	-> policy(controller, result); shown if non-empty str
#		2) literal text		-> shown verbatim, result ignored
#		3) no policy		-> result shown if non-empty str or a number (0 included)
#						   bool counts as a number and shows as "1" or "0"
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/13/2026	Paul G. LeDuc				Initial coding / release
# 10/17/2026	Paul G. LeDuc				Show bool results as 1/0
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

from ezmenu.menu.items import TooltipPolicy


def resolve_tooltip_text(policy: TooltipPolicy, controller: Any, result: Any) -> Optional[str]:
	if callable(policy):
		text = policy(controller, result)
		if isinstance(text, str) and text:
			return text
		return None

	if isinstance(policy, str) and policy:
		return policy

	if isinstance(result, str):
		return result or None

	if isinstance(result, bool):
		return str(int(result))

	if isinstance(result, (int, float)):
		return str(result)

	return None
