"""
Admin panel: login/logout/verify API, login page, and the session-gated
dashboard (message moderation page and analytics).
"""
import html
import json
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from auth import AdminDirectory, extract_token, issue_token, verify_token
from config import COOKIE_SECURE, SESSION_COOKIE_NAME, SESSION_TTL_HOURS
from dependencies import get_admin_directory, get_message_store
from errors import AuthenticationError, ValidationError
from storage import MessageRepository
from utils.validation import is_valid_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])

# Team and gallery figures are not tracked anywhere yet; the dashboard shows fixed numbers
MOCK_TEAM_STATS = {
    "total": 24,
    "byCategory": {"core": 8, "mentors": 4, "members": 10, "alumni": 2},
    "byDepartment": {"Mechanical": 8, "Electronics": 7, "Software": 6, "Management": 3},
    "trend": 12.5,
}
MOCK_GALLERY_STATS = {
    "total": 156,
    "byCategory": {
        "robots": 42, "events": 38, "workshops": 28,
        "competitions": 24, "team": 14, "milestones": 10,
    },
    "trend": 8.3,
}


EMPTY_ROW = '<tr><td colspan="6">No messages yet.</td></tr>'


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


def _session_cookie_args() -> dict:
    return {
        "key": SESSION_COOKIE_NAME,
        "path": "/",
        "secure": COOKIE_SECURE,
        "httponly": True,
        "samesite": "strict",
    }


# ============================================
# Session API
# ============================================

@router.post("/admin/login")
def login(
    request: LoginRequest,
    response: Response,
    admins: AdminDirectory = Depends(get_admin_directory)
):
    """Check credentials and set the HTTP-only session cookie."""
    if not request.email or not request.password:
        raise ValidationError(["Email and password are required"])
    if not is_valid_email(request.email):
        raise ValidationError(["Invalid email format"])

    admin = admins.verify_credentials(request.email, request.password)
    if admin is None:
        raise AuthenticationError()

    token = issue_token({"email": admin["email"], "role": admin["role"]})
    response.set_cookie(
        value=token,
        max_age=SESSION_TTL_HOURS * 60 * 60,
        **_session_cookie_args()
    )
    logger.info("Admin %s logged in", admin["email"])

    return {"success": True, "token": token, "admin": admin}


@router.post("/admin/logout")
async def logout(response: Response):
    """Clear the session cookie. Tokens are stateless, so nothing else to revoke."""
    response.delete_cookie(**_session_cookie_args())
    return {"success": True, "message": "Logged out successfully"}


@router.get("/admin/verify")
async def verify(request: Request):
    """Report whether the caller holds a valid session."""
    token = extract_token(request)
    if not token:
        return JSONResponse(
            status_code=401,
            content={"authenticated": False, "message": "No authentication token found"}
        )

    payload = verify_token(token)
    if not payload:
        return JSONResponse(
            status_code=401,
            content={"authenticated": False, "message": "Invalid or expired token"}
        )

    return {
        "authenticated": True,
        "admin": {"email": payload.get("email"), "role": payload.get("role")},
    }


# ============================================
# Dashboard (behind AdminSessionMiddleware)
# ============================================

@router.get("/dashboard/analytics")
def analytics(store: MessageRepository = Depends(get_message_store)):
    """Contact stats from the store plus fixed team/gallery figures."""
    return {
        "success": True,
        "contacts": store.stats(),
        "team": MOCK_TEAM_STATS,
        "gallery": MOCK_GALLERY_STATS,
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/login", response_class=HTMLResponse)
async def login_page(redirect: str = "/dashboard"):
    """Serve the admin login form."""
    # Only same-site paths are allowed as the post-login target
    if not redirect.startswith("/") or redirect.startswith("//"):
        redirect = "/dashboard"
    target = html.escape(redirect, quote=True)

    return HTMLResponse(f"""
        <!DOCTYPE html>
        <html>
        <head>
            <title>TeamRAW Admin - Login</title>
            <style>
                body {{ font-family: -apple-system, BlinkMacSystemFont, sans-serif; background: #0a0a0a; color: #eee; }}
                form {{ max-width: 320px; margin: 120px auto; display: flex; flex-direction: column; gap: 12px; }}
                input, button {{ padding: 10px; border-radius: 6px; border: 1px solid #333; }}
                button {{ background: #e63946; color: white; cursor: pointer; }}
                .error {{ color: #e63946; min-height: 1em; }}
            </style>
        </head>
        <body>
            <form id="login" data-redirect="{target}">
                <h1>TeamRAW Admin</h1>
                <input type="email" name="email" placeholder="Email" required>
                <input type="password" name="password" placeholder="Password" required>
                <button type="submit">Sign in</button>
                <div class="error" id="error"></div>
            </form>
            <script>
                const form = document.getElementById('login');
                form.addEventListener('submit', async (e) => {{
                    e.preventDefault();
                    const resp = await fetch('/admin/login', {{
                        method: 'POST',
                        headers: {{ 'Content-Type': 'application/json' }},
                        body: JSON.stringify({{ email: form.email.value, password: form.password.value }})
                    }});
                    if (resp.ok) {{
                        window.location.href = form.dataset.redirect;
                    }} else {{
                        const data = await resp.json();
                        document.getElementById('error').textContent =
                            (data.errors && data.errors[0]) || data.message || 'Login failed';
                    }}
                }});
            </script>
        </body>
        </html>
    """)


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(store: MessageRepository = Depends(get_message_store)):
    """Contact message moderation page."""
    messages = store.list_messages()
    stats = store.stats()

    # Text fields were HTML-escaped when stored
    rows = ""
    for m in messages:
        js_id = html.escape(json.dumps(m.id), quote=True)
        toggle = "unread" if m.status == "read" else "read"
        rows += f"""
            <tr class="{m.status}">
                <td>{m.timestamp[:10]}</td>
                <td>{m.full_name}<br><small>{m.email}</small></td>
                <td>{m.inquiry_type}</td>
                <td>{m.message}</td>
                <td>{m.status}{' / replied' if m.replied else ''}</td>
                <td>
                    <button onclick="patchMessage({js_id}, {{status: '{toggle}'}})">Mark {toggle}</button>
                    <button onclick="patchMessage({js_id}, {{replied: {'false' if m.replied else 'true'}}})">
                        {'Unmark replied' if m.replied else 'Mark replied'}
                    </button>
                    <button onclick="deleteMessage({js_id})">Delete</button>
                </td>
            </tr>
        """

    return HTMLResponse(f"""
        <!DOCTYPE html>
        <html>
        <head>
            <title>TeamRAW Admin - Messages</title>
            <style>
                body {{ font-family: -apple-system, BlinkMacSystemFont, sans-serif; background: #0a0a0a; color: #eee; padding: 20px; }}
                .stats {{ display: flex; gap: 20px; margin-bottom: 20px; }}
                .stat {{ background: #1a1a1a; padding: 15px 25px; border-radius: 8px; }}
                table {{ width: 100%; border-collapse: collapse; }}
                td, th {{ padding: 10px; border-bottom: 1px solid #333; text-align: left; vertical-align: top; }}
                tr.unread td {{ font-weight: bold; }}
                button {{ margin: 2px; cursor: pointer; }}
            </style>
        </head>
        <body>
            <h1>Contact Messages</h1>
            <div class="stats">
                <div class="stat">Total: {stats['total']}</div>
                <div class="stat">Unread: {stats['unread']}</div>
                <div class="stat">General: {stats['byInquiryType']['general']}</div>
                <div class="stat">Membership: {stats['byInquiryType']['membership']}</div>
            </div>
            <button onclick="logout()">Log out</button>
            <table>
                <tr><th>Date</th><th>From</th><th>Type</th><th>Message</th><th>Status</th><th></th></tr>
                {rows or EMPTY_ROW}
            </table>
            <script>
                async function patchMessage(id, body) {{
                    await fetch(`/contact-messages/${{encodeURIComponent(id)}}`, {{
                        method: 'PATCH',
                        headers: {{ 'Content-Type': 'application/json' }},
                        body: JSON.stringify(body)
                    }});
                    location.reload();
                }}
                async function deleteMessage(id) {{
                    if (!confirm('Delete this message?')) return;
                    await fetch(`/contact-messages/${{encodeURIComponent(id)}}`, {{ method: 'DELETE' }});
                    location.reload();
                }}
                async function logout() {{
                    await fetch('/admin/logout', {{ method: 'POST' }});
                    window.location.href = '/login';
                }}
            </script>
        </body>
        </html>
    """)
