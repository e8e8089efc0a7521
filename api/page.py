"""메인 화면 HTML 렌더링"""
from html import escape
from typing import List

from renderer.highlight import SegmentView, render_segments
from state.session_state import TranslationSession
from utils.language_utils import SUPPORTED_LANGUAGES

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>LinguaSync</title>
{refresh}
<script src="https://cdn.tailwindcss.com"></script>
<script>
tailwind.config = {{ theme: {{ extend: {{ colors: {{ brand: {{
  400: '#38bdf8', 500: '#0ea5e9', 600: '#0284c7', 900: '#0c4a6e'
}} }} }} }} }};
</script>
</head>
<body class="min-h-screen bg-slate-950 text-slate-200 font-sans">
<header class="bg-slate-900/50 border-b border-slate-800">
  <div class="max-w-5xl mx-auto px-4 py-4 flex items-center justify-between">
    <h1 class="text-xl font-bold text-brand-400">LinguaSync</h1>
    <div class="text-xs font-medium text-slate-500 border border-slate-800 rounded-full px-3 py-1">{model_badge}</div>
  </div>
</header>
<main class="max-w-5xl mx-auto px-4 py-8 space-y-8">
  <section class="space-y-6 bg-slate-900 p-6 rounded-2xl border border-slate-800 shadow-xl">
    <div class="grid grid-cols-1 md:grid-cols-2 gap-6">
      <form method="post" action="/session/source" class="space-y-2">
        <label class="text-sm font-medium text-slate-400 uppercase tracking-wider" for="source_language">Translate From</label>
        <select id="source_language" name="source_language" onchange="this.form.submit()"
          class="w-full bg-slate-800 border border-slate-700 text-white rounded-xl px-4 py-3">
{source_options}
        </select>
      </form>
      <div class="space-y-2">
        <label class="text-sm font-medium text-slate-400 uppercase tracking-wider">Translate To</label>
        <div class="flex flex-wrap gap-2">
{target_buttons}
        </div>
      </div>
    </div>
    <form id="translate-form" method="post" action="/translate" class="relative">
      <textarea name="text" placeholder="Enter text here to analyze syntax differences..."
        class="w-full h-32 bg-slate-800/50 border border-slate-700 rounded-xl p-4 text-lg text-slate-200 resize-none">{input_text}</textarea>
      <div class="absolute bottom-4 right-4">
        <button id="submit" type="submit" data-loading="{loading_flag}" {submit_disabled}
          class="px-6 py-2 rounded-full font-bold shadow-lg {submit_classes}">{submit_label}</button>
      </div>
    </form>
{error_banner}
  </section>
{loading}
{results}
</main>
<script>
(function () {{
  var textarea = document.querySelector('textarea[name="text"]');
  var button = document.getElementById('submit');
  if (textarea && button && button.dataset.loading !== 'true') {{
    textarea.addEventListener('input', function () {{ button.disabled = textarea.value.trim() === ''; }});
  }}
  var form = document.getElementById('translate-form');
  var loading = document.getElementById('loading');
  if (form && button) {{
    form.addEventListener('submit', function (event) {{
      if (button.disabled) {{ event.preventDefault(); return; }}
      button.disabled = true;
      button.textContent = 'Translating...';
      if (loading) {{ loading.classList.remove('hidden'); }}
      var results = document.getElementById('results');
      if (results) {{ results.classList.add('hidden'); }}
    }});
  }}
  var segments = document.querySelectorAll('[data-match-id]');
  function apply(hovered) {{
    segments.forEach(function (el) {{
      var id = parseInt(el.dataset.matchId, 10);
      if (!(id > 0)) {{ return; }}
      if (hovered === null) {{ el.className = el.dataset.normal; }}
      else if (hovered === id) {{ el.className = el.dataset.hovered; }}
      else {{ el.className = el.dataset.dimmed; }}
    }});
  }}
  segments.forEach(function (el) {{
    el.addEventListener('pointerenter', function () {{
      var id = parseInt(el.dataset.matchId, 10);
      if (id > 0) {{ apply(id); }}
    }});
    el.addEventListener('pointerleave', function () {{ apply(null); }});
  }});
}})();
</script>
</body>
</html>
"""


def _render_segment(view: SegmentView) -> str:
    return (
        f'<span data-match-id="{view.match_id}" class="{escape(view.classes)}" '
        f'data-normal="{escape(view.normal_classes)}" '
        f'data-hovered="{escape(view.hovered_classes)}" '
        f'data-dimmed="{escape(view.dimmed_classes)}">{escape(view.text)}</span>'
    )


def _render_panel(title: str, dot_class: str, views: List[SegmentView]) -> str:
    spans = "".join(_render_segment(view) for view in views)
    return f"""    <div class="space-y-3">
      <h3 class="text-xs font-bold text-slate-500 uppercase tracking-widest flex items-center gap-2">
        <span class="w-2 h-2 rounded-full {dot_class}"></span>{escape(title)}
      </h3>
      <div class="bg-slate-900 p-6 rounded-2xl border border-slate-800 leading-relaxed">{spans}</div>
    </div>"""


def render_results(session: TranslationSession) -> str:
    state = session.state
    if state.result is None or state.is_loading:
        return ""
    hovered = state.hovered_match_id
    panels = [
        _render_panel(
            f"Original Text ({state.source_language.value})",
            "bg-brand-500",
            render_segments(state.result.source_segments, hovered)
        )
    ]
    for translation in state.result.translations:
        panels.append(
            _render_panel(
                f"{translation.language} Translation",
                "bg-emerald-500",
                render_segments(translation.segments, hovered)
            )
        )
    hint = (
        '    <div class="text-center text-sm text-slate-600">'
        "<p>Hover over any colored word to identify its counterpart in other languages.</p></div>"
    )
    return '  <section id="results" class="space-y-8 pb-20">\n' + "\n".join(panels) + "\n" + hint + "\n  </section>"


def render_page(session: TranslationSession, model_name: str = "") -> str:
    """세션 상태로 전체 페이지 렌더링"""
    state = session.state

    source_options = "\n".join(
        f'          <option value="{escape(lang.value)}"{" selected" if lang == state.source_language else ""}>'
        f"{escape(lang.value)}</option>"
        for lang in SUPPORTED_LANGUAGES
    )

    buttons = []
    for lang in session.available_targets():
        selected = lang in state.target_languages
        classes = (
            "bg-brand-600 border-brand-500 text-white"
            if selected
            else "bg-slate-800 border-slate-700 text-slate-400"
        )
        buttons.append(
            '          <form method="post" action="/session/targets">'
            f'<input type="hidden" name="language" value="{escape(lang.value)}">'
            f'<button type="submit" aria-pressed="{"true" if selected else "false"}" '
            f'class="px-4 py-2 rounded-xl text-sm font-medium border {classes}">{escape(lang.value)}</button></form>'
        )

    can_submit = session.can_submit()
    error_banner = ""
    if state.error:
        error_banner = (
            '    <div role="alert" class="text-red-400 bg-red-900/20 p-4 rounded-lg border border-red-900/50">'
            f'<p class="text-sm">{escape(state.error)}</p></div>'
        )

    # 제출 직후 페이지 스크립트가 hidden을 제거
    loading = (
        '  <div id="loading" class="'
        + ("" if state.is_loading else "hidden ")
        + 'flex justify-center p-8 text-brand-500">Translating...</div>'
    )

    return PAGE_TEMPLATE.format(
        model_badge=escape(f"Powered by {model_name}" if model_name else "LinguaSync"),
        source_options=source_options,
        target_buttons="\n".join(buttons),
        input_text=escape(state.input_text),
        loading_flag="true" if state.is_loading else "false",
        submit_disabled="" if can_submit else "disabled",
        submit_classes=(
            "bg-brand-500 hover:bg-brand-400 text-white"
            if can_submit
            else "bg-slate-700 text-slate-500 cursor-not-allowed"
        ),
        submit_label="Translating..." if state.is_loading else "Analyze &amp; Translate",
        error_banner=error_banner,
        loading=loading,
        # 다른 요청이 진행 중인 세션은 결과가 나올 때까지 주기적으로 새로고침
        refresh='<meta http-equiv="refresh" content="2">' if state.is_loading else "",
        results=render_results(session),
    )
