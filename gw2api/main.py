from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse

from gw2api import apiChecks
from gw2api.auth import require_basic_auth
from gw2api.logger import logger

app = FastAPI(title="GW2 API Monitor")


@app.get("/api/status")
async def api_status(user: str = Depends(require_basic_auth)) -> JSONResponse:
    await apiChecks.run_checks_once()
    return JSONResponse({"results": list(apiChecks.LATEST.values())})


# manual trigger
@app.post("/api/run")
async def run_now(user: str = Depends(require_basic_auth)) -> JSONResponse:
    await apiChecks.run_checks_once()
    failed = [r["name"] for r in apiChecks.LATEST.values() if not r["ok"]]
    if failed:
        logger.info("manual run: %d endpoint(s) not ok: %s", len(failed), ", ".join(failed))
    return JSONResponse({"ok": True, "count": len(apiChecks.LATEST)})


@app.get("/", response_class=HTMLResponse)
async def home(user: str = Depends(require_basic_auth)) -> str:
    return DASHBOARD_HTML


DASHBOARD_HTML = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>GW2 API Monitor</title>
  <style>
    body { font-family: Segoe UI, Arial, sans-serif; margin: 16px; }
    table { border-collapse: collapse; width: 100%; }
    th, td { border-bottom: 1px solid #ddd; padding: 8px; text-align: left; }
    th { position: sticky; top: 0; background: #f7f7f7; }
    .flag { display: inline-block; margin-right: 4px; padding: 0 4px;
            border-radius: 3px; background: #eef; font-size: 0.8em; }
    .muted { color: #666; font-size: 0.9em; }
  </style>
</head>
<body>
  <h2>GW2 API Monitor</h2>
  <div class="muted">Probes every registered endpoint once a minute</div>
  <p><button onclick="loadData()">Check now</button></p>
  <table>
    <thead>
      <tr>
        <th></th>
        <th>Endpoint</th>
        <th>Capabilities</th>
        <th>HTTP</th>
        <th>Latency (ms)</th>
        <th>Bytes</th>
        <th>Checked</th>
        <th>Reason</th>
      </tr>
    </thead>
    <tbody id="rows"></tbody>
  </table>

<script>
async function loadData() {
  const r = await fetch('/api/status');
  const j = await r.json();
  const rows = document.getElementById('rows');
  rows.innerHTML = '';

  for (const item of j.results) {
    const flags = (item.flags || []).map(f => `<span class="flag">${f}</span>`).join('');
    const tr = document.createElement('tr');
    tr.innerHTML = `
        <td>${item.ok ? '&#10003;' : '&#10007;'}</td>
        <td><div>${item.name}</div><div class="muted">${item.url}</div></td>
        <td>${flags}</td>
        <td>${item.status_code ?? ''}</td>
        <td>${item.latency_ms ?? ''}</td>
        <td>${item.body_len ?? ''}</td>
        <td>${item.ts ?? ''}</td>
        <td>${item.reason ?? ''}</td>
        `;
    rows.appendChild(tr);
  }
}

loadData();
setInterval(loadData, 60000);
</script>
</body>
</html>
"""
