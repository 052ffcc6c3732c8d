# sewa_bot/telegram/ux.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

NOT_AUTHORIZED_TEXT = (
    "⚠️ आप इस बॉट का उपयोग करने के लिए अधिकृत नहीं हैं।\n"
    "You are not authorized to use this bot."
)

PROCESSING_TEXT = "🔄 Processing... विश्लेषण हो रहा है..."
PROCESSING_PHOTO_TEXT = "🔄 फोटो प्रोसेस हो रही है... Processing photo..."
PROCESSING_DOCUMENT_TEXT = "🔄 दस्तावेज़ प्रोसेस हो रहा है... Processing document..."

TEXT_FAILURE = "❌ Error: "
PHOTO_FAILURE = "❌ Photo upload error: "
DOCUMENT_FAILURE = "❌ Document upload error: "
STATUS_FAILURE = "❌ Status check failed: "
RECENT_FAILURE = "❌ Could not load recent updates: "


def _safe(value: Any, default: str = "—") -> str:
    if value is None or value == "":
        return default
    return str(value)


def build_welcome(website_url: str) -> str:
    return "\n".join([
        "🙏 नमस्ते! SEWA Smart Village AI में आपका स्वागत है!",
        "",
        "Welcome to SEWA Smart Village AI Bot!",
        "",
        "मैं आपकी मदद कर सकता हूं:",
        "• 📰 समाचार/घोषणाएं जोड़ें",
        "• 📷 फोटो अपलोड करें",
        "• 📄 दस्तावेज़ जोड़ें",
        "• 🏛️ हेरिटेज जानकारी अपडेट करें",
        "",
        "Simply send me:",
        "• Text message for news/announcements",
        "• Photos for gallery",
        "• Documents to upload",
        "",
        "Commands:",
        "/help - सहायता",
        "/status - वेबसाइट स्थिति",
        "/recent - हाल के अपडेट",
        "",
        f"🌐 Website: {website_url}",
    ])


def build_help() -> str:
    return "\n".join([
        "📚 SEWA Village AI - सहायता",
        "",
        "कैसे उपयोग करें:",
        "",
        "1️⃣ समाचार जोड़ें:",
        "   बस टेक्स्ट भेजें, जैसे:",
        "   \"कल ग्राम सभा होगी शाम 5 बजे\"",
        "",
        "2️⃣ फोटो जोड़ें:",
        "   फोटो भेजें + कैप्शन में विवरण",
        "",
        "3️⃣ घोषणा:",
        "   #announcement के साथ संदेश भेजें",
        "",
        "4️⃣ इमरजेंसी:",
        "   #emergency के साथ संदेश भेजें",
        "",
        "Commands:",
        "/start - शुरू करें",
        "/help - यह संदेश",
        "/status - बॉट स्थिति",
        "/recent - हाल के अपडेट देखें",
    ])


def build_status(full_name: str, last_updated: str, providers: Iterable[str]) -> str:
    providers = list(providers)
    ai = " ".join(f"{name} ✓" for name in providers) if providers else "default only"
    return "\n".join([
        "✅ SEWA Village AI Status",
        "",
        "🌐 Website: Active",
        "📦 GitHub: Connected",
        f"🤖 AI: {ai}",
        f"📊 Repo: {full_name}",
        f"⏰ Last Updated: {last_updated}",
    ])


def build_recent(items: List[Dict[str, Any]]) -> str:
    if not items:
        return "📭 अभी कोई अपडेट नहीं है। No updates yet."

    lines = ["🕘 हाल के अपडेट / Recent updates:", ""]
    for item in items:
        lines.append(
            f"• {_safe(item.get('date'))} [{_safe(item.get('category'))}] "
            f"{_safe(item.get('title_hindi'))} (🆔 {_safe(item.get('id'))})"
        )
    return "\n".join(lines)


def build_text_ack(category: str, title: str, record_id: str, website_url: str) -> str:
    return "\n".join([
        "✅ सफलतापूर्वक जोड़ा गया! Successfully added!",
        "",
        f"📌 Category: {category}",
        f"📝 Title: {title}",
        f"🆔 ID: {record_id}",
        "",
        "🌐 Website will update in ~1 minute",
        f"🔗 {website_url}",
    ])


def build_photo_ack(category: str, title: str, path: str, website_url: str) -> str:
    return "\n".join([
        "✅ फोटो अपलोड हो गई! Photo uploaded!",
        "",
        f"📌 Category: {category}",
        f"📝 Title: {title}",
        f"📁 Path: {path}",
        "",
        "🌐 Website updating...",
        f"🔗 {website_url}",
    ])


def build_document_ack(filename: str, path: str) -> str:
    return "\n".join([
        "✅ दस्तावेज़ अपलोड हो गया! Document uploaded!",
        "",
        f"📄 File: {filename}",
        f"📁 Path: {path}",
        "",
        "🌐 Website updating...",
    ])


def build_failure(prefix: str, error: Optional[BaseException]) -> str:
    return f"{prefix}{error}"
