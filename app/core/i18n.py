"""
Static bilingual (Persian / English) message table.

Every user-visible message the API returns is looked up here by key, in
the language negotiated from the request's ``Accept-Language`` header.
"""

from __future__ import annotations

from fastapi import Request

from app.core.config import settings

SUPPORTED_LANGUAGES = ("fa", "en")

MESSAGES: dict[str, dict[str, str]] = {
    # ── Auth ────────────────────────────────────────────────────────
    "auth.invalid_credentials": {
        "fa": "نام کاربری یا رمز عبور نادرست است",
        "en": "Invalid username or password",
    },
    "auth.login_required": {
        "fa": "لطفا وارد حساب کاربری خود شوید",
        "en": "Please log in to your account",
    },
    "auth.not_logged_in": {
        "fa": "کاربر وارد نشده است",
        "en": "User is not logged in",
    },
    "auth.forbidden": {
        "fa": "شما دسترسی به این بخش را ندارید",
        "en": "You do not have access to this section",
    },
    "auth.logged_out": {
        "fa": "با موفقیت خارج شدید",
        "en": "Logged out successfully",
    },
    "auth.rate_limited": {
        "fa": "تعداد درخواست‌ها بیش از حد مجاز است، لطفا بعدا تلاش کنید",
        "en": "Too many requests, please try again later",
    },
    # ── Validation / generic ────────────────────────────────────────
    "validation.failed": {
        "fa": "خطا در اعتبارسنجی اطلاعات",
        "en": "Invalid request data",
    },
    "validation.invalid_id": {
        "fa": "شناسه نامعتبر است",
        "en": "Invalid identifier",
    },
    "error.internal": {
        "fa": "خطای داخلی سرور",
        "en": "Internal server error",
    },
    "error.database": {
        "fa": "خطا در ارتباط با پایگاه داده",
        "en": "Internal database error",
    },
    "error.not_found": {
        "fa": "مورد درخواستی یافت نشد",
        "en": "The requested resource was not found",
    },
    # ── Categories ──────────────────────────────────────────────────
    "category.not_found": {
        "fa": "دسته‌بندی یافت نشد",
        "en": "Category not found",
    },
    "category.deleted": {
        "fa": "دسته‌بندی با موفقیت حذف شد",
        "en": "Category deleted successfully",
    },
    # ── Products ────────────────────────────────────────────────────
    "product.not_found": {
        "fa": "محصول یافت نشد",
        "en": "Product not found",
    },
    "product.deleted": {
        "fa": "محصول با موفقیت حذف شد",
        "en": "Product deleted successfully",
    },
    # ── Gallery ─────────────────────────────────────────────────────
    "gallery.not_found": {
        "fa": "تصویر یافت نشد",
        "en": "Image not found",
    },
    "gallery.deleted": {
        "fa": "تصویر با موفقیت حذف شد",
        "en": "Image deleted successfully",
    },
    # ── Contact ─────────────────────────────────────────────────────
    "contact.sent": {
        "fa": "پیام شما با موفقیت ارسال شد",
        "en": "Your message has been sent",
    },
    "contact.not_found": {
        "fa": "پیام یافت نشد",
        "en": "Message not found",
    },
    "contact.deleted": {
        "fa": "پیام با موفقیت حذف شد",
        "en": "Message deleted successfully",
    },
}


def translate(key: str, lang: str | None = None) -> str:
    """Return the message for *key* in *lang*, falling back to the default language."""
    entry = MESSAGES.get(key)
    if entry is None:
        return key
    lang = lang if lang in SUPPORTED_LANGUAGES else settings.DEFAULT_LANGUAGE
    return entry.get(lang) or entry[settings.DEFAULT_LANGUAGE]


def negotiate_language(accept_language: str | None) -> str:
    """Pick ``fa`` or ``en`` from an Accept-Language header value.

    Quality weights are honoured; unknown languages are skipped.
    """
    if not accept_language:
        return settings.DEFAULT_LANGUAGE

    candidates: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        piece = part.strip()
        if not piece:
            continue
        tag, _, params = piece.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        primary = tag.strip().lower().split("-")[0]
        if primary in SUPPORTED_LANGUAGES and quality > 0:
            candidates.append((-quality, position, primary))

    if not candidates:
        return settings.DEFAULT_LANGUAGE
    return min(candidates)[2]


def get_language(request: Request) -> str:
    """FastAPI dependency — language for the current request."""
    return negotiate_language(request.headers.get("accept-language"))
