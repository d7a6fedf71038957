#app\services\storage.py
import base64
import requests, uuid
from app.core.config import settings

MAX_BYTES = 2 * 1024 * 1024
ALLOWED = {"image/jpeg", "image/png", "image/webp", "image/gif"}

def upload_image(data: bytes, content_type: str, path: str) -> str:
    """Uploads to Supabase Storage via REST; returns public URL (bucket must be public)."""
    if not (settings.supabase_url and settings.supabase_service_role):
        # no bucket configured: keep the image inline
        b64 = base64.b64encode(data).decode('utf-8')
        return f"data:{content_type};base64,{b64}"
    bucket = settings.supabase_bucket
    url = f"{settings.supabase_url}/storage/v1/object/{bucket}/{path}"
    r = requests.post(url, headers={
        "Authorization": f"Bearer {settings.supabase_service_role}",
        "Content-Type": content_type,
        "x-upsert": "true",
    }, data=data, timeout=30)
    r.raise_for_status()
    # public URL pattern:
    return f"{settings.supabase_url}/storage/v1/object/public/{bucket}/{path}"

def make_object_key(user_id: str, filename: str) -> str:
    ext = (filename.rsplit(".",1)[-1] if "." in filename else "jpg").lower()
    return f"{user_id}/{uuid.uuid4().hex}.{ext}"
