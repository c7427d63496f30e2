"""공통 HTML 테마 — 다크 테마 CSS + HTML 골격"""

DARK_THEME_CSS = """
:root {
    --bg-page: #0f1117;
    --bg-card: #161b22;
    --bg-panel: #1c2128;
    --text-primary: #e5e7eb;
    --text-secondary: #9ca3af;
    --text-tertiary: #6b7280;
    --accent: #58a6ff;
    --border: rgba(255,255,255,0.08);
    --hover-overlay: rgba(255,255,255,0.04);
}
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, 'Pretendard', sans-serif; background: var(--bg-page); color: var(--text-primary); }
.container { max-width: 960px; margin: 0 auto; padding: 24px; }

.badge { display: inline-block; padding: 2px 8px; border-radius: 4px; font-size: 11px; font-weight: 600; }

/* Focus-visible: keyboard only, not mouse */
*:focus-visible { outline: 2px solid var(--accent); outline-offset: 2px; }
*:focus:not(:focus-visible) { outline: none; }

@media (max-width: 768px) {
    .container { padding: 12px; }
}
""".strip()


def wrap_html(title: str, body: str, *, extra_css: str = "", extra_js: str = "") -> str:
    js_block = f"<script>\n{extra_js}\n</script>" if extra_js else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
{DARK_THEME_CSS}
{extra_css}
</style>
</head>
<body>
{body}
{js_block}
</body>
</html>"""
