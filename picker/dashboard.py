"""대시보드 HTML 빌더 — 검색 가능한 태스크 리스트 + 액션 패널"""

from __future__ import annotations

from picker.theme import wrap_html

_EXTRA_CSS = """
/* Layout */
.top-bar {
    display: flex; justify-content: space-between; align-items: center;
    padding: 14px 24px; background: #1a1d27; border-radius: 12px; margin-bottom: 16px;
}
.top-bar h1 { font-size: 22px; color: #fff; }
.loading-dot { width: 10px; height: 10px; border-radius: 50%; display: inline-block; margin-left: 8px; background: #666; }
.loading-dot.loading { background: #3b82f6; animation: pulse 1.5s infinite; }
@keyframes pulse { 0%,100% { opacity: 1; } 50% { opacity: 0.4; } }

.btn { border: none; border-radius: 8px; padding: 8px 18px; font-size: 13px; font-weight: 600; cursor: pointer; transition: 0.2s; }
.btn-blue { background: #3b82f6; color: #fff; }
.btn-blue:hover { background: #2563eb; }
.btn-gray { background: #374151; color: #e0e0e0; }
.btn-gray:hover { background: #4b5563; }
.btn:disabled { opacity: 0.4; cursor: not-allowed; }
.btn-sm { padding: 4px 10px; font-size: 11px; }

.search-bar input, .paste-target input {
    width: 100%; background: #13151c; border: 1px solid #252830; border-radius: 8px;
    padding: 10px 14px; color: #e0e0e0; font-size: 14px; margin-bottom: 12px;
}
.paste-target input { font-size: 12px; padding: 6px 12px; }

/* Task list */
.task-list { background: #13151c; border-radius: 12px; padding: 6px; }
.task-row {
    display: flex; align-items: center; gap: 12px; padding: 10px 12px; border-radius: 8px;
    cursor: pointer; border: 1px solid transparent;
}
.task-row:hover { background: #1a1d27; }
.task-row.selected { border-color: #3b82f6; background: #1a1d27; }
.task-id { font-family: 'SF Mono', 'Fira Code', monospace; font-size: 13px; font-weight: 700; color: #fff; min-width: 90px; }
.task-title { flex: 1; font-size: 13px; color: #9ca3af; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; }
.status-tag { padding: 3px 10px; border-radius: 6px; font-size: 11px; font-weight: 700; background: rgba(255,255,255,0.06); }

.empty-view { color: #555; text-align: center; padding: 48px 12px; }
.empty-view h3 { color: #aaa; font-size: 15px; margin-bottom: 6px; }

/* Action panel */
.action-panel { margin-top: 12px; background: #1a1d27; border-radius: 12px; padding: 12px 16px; display: none; }
.action-panel.open { display: block; }
.action-section { margin-bottom: 8px; }
.action-section h4 { font-size: 11px; color: #666; text-transform: uppercase; letter-spacing: 0.5px; margin-bottom: 6px; }
.action-section .btn { margin-right: 6px; margin-bottom: 4px; }
.shortcut { color: #888; font-weight: 400; margin-left: 6px; font-size: 10px; }

/* Toast */
.toast-container {
    position: fixed; bottom: 24px; right: 24px; z-index: 1000;
    display: flex; flex-direction: column-reverse; gap: 8px; pointer-events: none;
}
.toast {
    background: #1a1d27; border: 1px solid #374151; border-radius: 10px;
    padding: 12px 20px; font-size: 13px; color: #e0e0e0;
    box-shadow: 0 8px 32px rgba(0,0,0,0.4); pointer-events: auto;
    transform: translateX(120%); transition: transform 200ms ease-out, opacity 200ms ease-out;
    opacity: 0;
}
.toast-visible { transform: translateX(0); opacity: 1; }
.toast-exit { transform: translateX(120%); opacity: 0; }
.toast-success { border-left: 3px solid #22c55e; }
.toast-error { border-left: 3px solid #ef4444; }
.toast-info { border-left: 3px solid #3b82f6; }
"""

_BODY = """
<div class="container">
    <div class="top-bar">
        <div style="display:flex;align-items:center;gap:12px;">
            <h1>Sprint Tasks</h1>
            <span id="loadingDot" class="loading-dot"></span>
            <span id="updatedLabel" style="color:#888;font-size:12px;"></span>
        </div>
        <button class="btn btn-blue btn-sm" id="btnRefresh" onclick="refreshTasks()">Refresh Tasks</button>
    </div>

    <div class="search-bar">
        <input id="searchInput" placeholder="Search tasks by ID or name..." oninput="onSearchInput()" autofocus>
    </div>
    <div class="paste-target">
        <input id="pasteTarget" placeholder="Paste target (Paste Task ID inserts here)">
    </div>

    <div class="task-list" id="taskList"></div>
    <div class="action-panel" id="actionPanel"></div>
</div>

<div class="toast-container" id="toastContainer"></div>
"""

_JS = r"""
let allTasks = [];
let selectedId = null;
let searchQuery = '';
let searchTimer = null;
let lastError = null;
let lastNotice = null;

// ── List ──

function renderList(state) {
    allTasks = state.tasks;
    const list = document.getElementById('taskList');
    if(!state.is_loading && allTasks.length === 0) {
        list.innerHTML = `<div class="empty-view" id="emptyView">
            <h3>No Tasks Found</h3>
            <div>No tasks found in the current sprint (or no current sprint exists)</div>
        </div>`;
        closeActions();
        return;
    }
    list.innerHTML = allTasks.map(t => `
        <div class="task-row${t.id===selectedId?' selected':''}" data-id="${esc(t.id)}" onclick="selectTask(this.dataset.id)">
            <span class="task-id">${esc(t.task_id)}</span>
            <span class="task-title">${esc(t.title)}</span>
            <span class="status-tag" style="color:${t.color_css}">${esc(t.status)}</span>
        </div>`).join('');
    if(selectedId && !allTasks.some(t => t.id === selectedId)) closeActions();
}

function renderMeta(state) {
    document.getElementById('loadingDot').classList.toggle('loading', state.is_loading);
    document.getElementById('btnRefresh').disabled = state.is_loading;
    document.getElementById('updatedLabel').textContent = state.updated_at ? 'Updated ' + fmtTime(state.updated_at) : '';
    if(state.error && state.error !== lastError) showToast('Error: ' + state.error, 'error');
    if(state.notice && state.notice !== lastNotice) showToast(state.notice, 'info');
    lastError = state.error;
    lastNotice = state.notice;
}

// ── Search ──

function onSearchInput() {
    clearTimeout(searchTimer);
    searchTimer = setTimeout(() => {
        searchQuery = document.getElementById('searchInput').value.trim();
        loadTasks();
    }, 200);
}

// ── Tasks ──

async function loadTasks() {
    try {
        const url = searchQuery ? `/api/tasks?q=${encodeURIComponent(searchQuery)}` : '/api/tasks';
        const res = await fetch(url);
        const state = await res.json();
        renderMeta(state);
        renderList(state);
        if(state.is_loading) setTimeout(loadTasks, 500);
    } catch(e) { console.error('loadTasks', e); }
}

async function refreshTasks() {
    document.getElementById('loadingDot').classList.add('loading');
    try {
        const res = await fetch('/api/tasks/refresh', {method:'POST'});
        if(!res.ok) {
            const body = await res.json();
            showToast('Failed to fetch tasks: ' + (body.detail || res.status), 'error');
            lastError = body.detail;
        }
    } catch(e) { console.error('refreshTasks', e); }
    loadTasks();
}

// ── Actions ──

async function selectTask(id) {
    selectedId = id;
    document.querySelectorAll('.task-row').forEach(el => el.classList.toggle('selected', el.dataset.id === id));
    const res = await fetch(`/api/tasks/${encodeURIComponent(id)}/actions`);
    if(!res.ok) { closeActions(); return; }
    renderActions(await res.json());
}

function renderActions(actions) {
    const panel = document.getElementById('actionPanel');
    const sections = {};
    actions.forEach((a, i) => { (sections[a.section] = sections[a.section] || []).push([a, i]); });
    window._actions = actions;
    panel.innerHTML = Object.entries(sections).map(([title, items]) => `
        <div class="action-section">
            <h4>${esc(title)}</h4>
            ${items.map(([a, i]) => `<button class="btn btn-gray btn-sm" onclick="runAction(${i})">${esc(a.title)}${a.shortcut ? `<span class="shortcut">${esc(a.shortcut)}</span>` : ''}</button>`).join('')}
        </div>`).join('');
    panel.classList.add('open');
}

function closeActions() {
    selectedId = null;
    const panel = document.getElementById('actionPanel');
    panel.classList.remove('open');
    panel.innerHTML = '';
}

async function runAction(i) {
    const a = window._actions[i];
    if(a.kind === 'refresh') { refreshTasks(); return; }
    if(a.kind === 'paste') { pasteText(a.content); return; }
    await copyText(a.content);
}

async function copyText(text) {
    try {
        await navigator.clipboard.writeText(text);
        showToast('Copied to clipboard', 'success');
    } catch(e) { showToast('Copy failed', 'error'); }
}

function pasteText(text) {
    const target = document.getElementById('pasteTarget');
    const start = target.selectionStart ?? target.value.length;
    const end = target.selectionEnd ?? target.value.length;
    target.value = target.value.slice(0, start) + text + target.value.slice(end);
    target.focus();
    target.setSelectionRange(start + text.length, start + text.length);
}

function actionByShortcut(shortcut) {
    return (window._actions || []).findIndex(a => a.shortcut === shortcut);
}

document.addEventListener('keydown', (e) => {
    const mod = e.metaKey || e.ctrlKey;
    if(!mod) return;
    const key = e.key.toLowerCase();
    let shortcut = null;
    if(key === 'r') shortcut = 'cmd+r';
    else if(key === 'c' && selectedId && !window.getSelection().toString()) shortcut = e.shiftKey ? 'cmd+shift+c' : 'cmd+c';
    if(!shortcut) return;
    e.preventDefault();
    if(shortcut === 'cmd+r') { refreshTasks(); return; }
    const i = actionByShortcut(shortcut);
    if(i >= 0) runAction(i);
});

// ── Helpers ──

function showToast(msg, type) {
    type = type || 'info';
    const container = document.getElementById('toastContainer');
    const el = document.createElement('div');
    el.className = 'toast toast-' + type;
    el.textContent = msg;
    container.appendChild(el);
    while(container.children.length > 3) {
        container.removeChild(container.firstChild);
    }
    requestAnimationFrame(() => { el.classList.add('toast-visible'); });
    const delay = type === 'error' ? 8000 : 4000;
    setTimeout(() => {
        el.classList.remove('toast-visible');
        el.classList.add('toast-exit');
        setTimeout(() => { if(el.parentNode) el.parentNode.removeChild(el); }, 200);
    }, delay);
}

function esc(s) { const d=document.createElement('div'); d.textContent=s||''; return d.innerHTML.replace(/'/g, '&#39;').replace(/"/g, '&quot;'); }

function fmtTime(iso) {
    const d = new Date(iso);
    return d.toLocaleTimeString([], {hour:'2-digit', minute:'2-digit', second:'2-digit'});
}

// ── Init ──
loadTasks();
"""


def build_dashboard_html() -> str:
    return wrap_html(
        title="Sprint Task Picker",
        body=_BODY,
        extra_css=_EXTRA_CSS,
        extra_js=_JS,
    )
