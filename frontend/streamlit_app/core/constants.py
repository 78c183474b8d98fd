# frontend/streamlit_app/core/constants.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Static bilingual content for the kiosk website.

This module centralizes:
  1) **Business identity** shown in the hero, contact section and footer.
  2) **Service catalogue** (six departments, each with accordion items).
  3) **Why choose us / mission / vision / FAQ** copy.
  4) **UI strings** used by views, keyed by a short id.

Every user-facing value is a `{"hi": ..., "en": ...}` mapping; `pick()` and
`tr()` select the active language and fall back to Hindi.

Service category labels stored with inquiries are bilingual strings so the
admin panel reads the same whichever language the visitor used.
"""

from typing import Any, Final, Literal

Lang = Literal["hi", "en"]
LANGS: Final[tuple[str, ...]] = ("hi", "en")
LANG_LABELS: Final[dict[str, str]] = {"hi": "हिन्दी", "en": "English"}


def pick(value: Any, lang: str) -> Any:
    """Return the `lang` variant of a bilingual mapping (Hindi fallback)."""
    if isinstance(value, dict) and "hi" in value:
        return value.get(lang) or value["hi"]
    return value


# ---------------------------------------------------------------------------
# Business identity
# ---------------------------------------------------------------------------

BUSINESS: Final[dict[str, Any]] = {
    "name": {"hi": "वैष्णवी ई-मित्र एवं CSC केन्द्र", "en": "Vaishnavi e-Mitra & CSC Centre"},
    "tagline": {
        "hi": "डिजिटल इंडिया की सभी सेवाएँ, एक ही जगह",
        "en": "Every Digital India service under one roof",
    },
    "location": {"hi": "करौली, राजस्थान", "en": "Karauli, Rajasthan"},
    "full_address": {
        "hi": "मुख्य बाज़ार, करौली, राजस्थान 322241",
        "en": "Main Market, Karauli, Rajasthan 322241",
    },
    "operator": {"hi": "संचालक: वैष्णवी ई-मित्र टीम", "en": "Operator: Vaishnavi e-Mitra team"},
    "hours": {
        "hi": "सोमवार से शनिवार, सुबह 9 से शाम 7 बजे",
        "en": "Monday to Saturday, 9 am to 7 pm",
    },
}

HERO: Final[dict[str, Any]] = {
    "description": {
        "hi": "आधार, पैन, बैंकिंग, बिल भुगतान, सरकारी योजनाएँ और ऑनलाइन फॉर्म, सब कुछ भरोसेमंद और तेज़ सेवा के साथ।",
        "en": "Aadhaar, PAN, banking, bill payments, government schemes and online forms, done quickly and reliably.",
    },
}

# ---------------------------------------------------------------------------
# Service catalogue
# ---------------------------------------------------------------------------

SERVICES: Final[list[dict[str, Any]]] = [
    {
        "icon": "🪪",
        "category": {"hi": "पहचान पत्र सेवाएँ", "en": "Identity documents"},
        "subtitle": {"hi": "आधार, पैन, वोटर आईडी", "en": "Aadhaar, PAN, voter ID"},
        "items": [
            {
                "title": {"hi": "आधार अपडेट", "en": "Aadhaar update"},
                "details": [
                    {"hi": "मोबाइल नंबर और पता अपडेट", "en": "Mobile number and address update"},
                    {"hi": "ई-आधार डाउनलोड व प्रिंट", "en": "e-Aadhaar download and print"},
                ],
            },
            {
                "title": {"hi": "पैन कार्ड", "en": "PAN card"},
                "details": [
                    {"hi": "नया पैन आवेदन", "en": "New PAN application"},
                    {"hi": "पैन सुधार और आधार लिंक", "en": "PAN correction and Aadhaar linking"},
                ],
            },
        ],
    },
    {
        "icon": "📜",
        "category": {"hi": "प्रमाण पत्र", "en": "Certificates"},
        "subtitle": {"hi": "ई-मित्र द्वारा जारी दस्तावेज़", "en": "Documents issued through e-Mitra"},
        "items": [
            {
                "title": {"hi": "जाति, निवास व आय प्रमाण पत्र", "en": "Caste, domicile and income certificates"},
                "details": [
                    {"hi": "ऑनलाइन आवेदन और स्थिति जाँच", "en": "Online application and status tracking"},
                ],
            },
            {
                "title": {"hi": "जन्म व मृत्यु प्रमाण पत्र", "en": "Birth and death certificates"},
                "details": [
                    {"hi": "पंजीकरण और प्रतिलिपि", "en": "Registration and copies"},
                ],
            },
        ],
    },
    {
        "icon": "🏦",
        "category": {"hi": "बैंकिंग सेवाएँ", "en": "Banking services"},
        "subtitle": {"hi": "AEPS, मनी ट्रांसफर", "en": "AEPS, money transfer"},
        "items": [
            {
                "title": {"hi": "आधार से पैसे निकालें", "en": "Aadhaar-enabled withdrawal"},
                "details": [
                    {"hi": "सभी बैंकों के लिए AEPS", "en": "AEPS for all banks"},
                    {"hi": "बैलेंस और मिनी स्टेटमेंट", "en": "Balance and mini statement"},
                ],
            },
            {
                "title": {"hi": "मनी ट्रांसफर", "en": "Money transfer"},
                "details": [
                    {"hi": "देश भर में तुरंत ट्रांसफर", "en": "Instant transfers across India"},
                ],
            },
        ],
    },
    {
        "icon": "💡",
        "category": {"hi": "बिल भुगतान व रिचार्ज", "en": "Bill payments & recharge"},
        "subtitle": {"hi": "बिजली, पानी, मोबाइल, DTH", "en": "Electricity, water, mobile, DTH"},
        "items": [
            {
                "title": {"hi": "बिजली और पानी बिल", "en": "Electricity and water bills"},
                "details": [
                    {"hi": "रसीद तुरंत उपलब्ध", "en": "Receipt issued on the spot"},
                ],
            },
            {
                "title": {"hi": "मोबाइल व DTH रिचार्ज", "en": "Mobile and DTH recharge"},
                "details": [
                    {"hi": "सभी ऑपरेटर", "en": "All operators"},
                ],
            },
        ],
    },
    {
        "icon": "🏛️",
        "category": {"hi": "सरकारी योजनाएँ", "en": "Government schemes"},
        "subtitle": {"hi": "पेंशन, किसान, राशन", "en": "Pensions, farmers, ration"},
        "items": [
            {
                "title": {"hi": "पीएम किसान और पेंशन", "en": "PM-Kisan and pensions"},
                "details": [
                    {"hi": "पंजीकरण और e-KYC", "en": "Registration and e-KYC"},
                ],
            },
            {
                "title": {"hi": "राशन कार्ड", "en": "Ration card"},
                "details": [
                    {"hi": "नाम जोड़ना या हटाना", "en": "Add or remove family members"},
                ],
            },
        ],
    },
    {
        "icon": "🎓",
        "category": {"hi": "शिक्षा, नौकरी व यात्रा", "en": "Education, jobs & travel"},
        "subtitle": {"hi": "ऑनलाइन फॉर्म, टिकट", "en": "Online forms, tickets"},
        "items": [
            {
                "title": {"hi": "भर्ती व परीक्षा फॉर्म", "en": "Recruitment and exam forms"},
                "details": [
                    {"hi": "फॉर्म भरना और एडमिट कार्ड", "en": "Form filling and admit cards"},
                ],
            },
            {
                "title": {"hi": "रेल और बस टिकट", "en": "Rail and bus tickets"},
                "details": [
                    {"hi": "आरक्षण और रद्दीकरण", "en": "Booking and cancellation"},
                ],
            },
        ],
    },
]

# Labels offered in the form's category select and stored with inquiries.
SERVICE_CATEGORIES: Final[list[str]] = [
    f"{s['category']['hi']} / {s['category']['en']}" for s in SERVICES
]

WHY_CHOOSE_US: Final[list[dict[str, Any]]] = [
    {
        "icon": "⚡",
        "title": {"hi": "तेज़ सेवा", "en": "Fast service"},
        "text": {"hi": "ज़्यादातर काम कुछ ही मिनटों में", "en": "Most work done in minutes"},
    },
    {
        "icon": "🔒",
        "title": {"hi": "सुरक्षित", "en": "Secure"},
        "text": {"hi": "आपके दस्तावेज़ सुरक्षित हाथों में", "en": "Your documents stay safe"},
    },
    {
        "icon": "💰",
        "title": {"hi": "उचित शुल्क", "en": "Fair fees"},
        "text": {"hi": "सरकारी दरों पर पारदर्शी शुल्क", "en": "Transparent, government-rate fees"},
    },
    {
        "icon": "🤝",
        "title": {"hi": "भरोसेमंद", "en": "Trusted"},
        "text": {"hi": "अधिकृत CSC और ई-मित्र केन्द्र", "en": "Authorised CSC and e-Mitra centre"},
    },
]

MISSION: Final[dict[str, Any]] = {
    "title": {"hi": "हमारा मिशन", "en": "Our mission"},
    "content": {
        "hi": "हर नागरिक तक सरकारी और डिजिटल सेवाएँ सरल, सस्ती और समय पर पहुँचाना।",
        "en": "Bring government and digital services to every citizen simply, affordably and on time.",
    },
}

VISION: Final[dict[str, Any]] = {
    "title": {"hi": "हमारा विज़न", "en": "Our vision"},
    "content": {
        "hi": "एक ऐसा करौली जहाँ किसी को सरकारी काम के लिए भटकना न पड़े।",
        "en": "A Karauli where nobody has to run around for government paperwork.",
    },
}

FAQ: Final[list[dict[str, Any]]] = [
    {
        "q": {"hi": "आधार अपडेट में कितना समय लगता है?", "en": "How long does an Aadhaar update take?"},
        "a": {
            "hi": "आवेदन केन्द्र पर 10 से 15 मिनट में हो जाता है; अपडेट UIDAI द्वारा कुछ दिनों में लागू होता है।",
            "en": "The application takes 10 to 15 minutes here; UIDAI applies the update within a few days.",
        },
    },
    {
        "q": {"hi": "कौन से दस्तावेज़ साथ लाएँ?", "en": "Which documents should I bring?"},
        "a": {
            "hi": "मूल आधार कार्ड, मोबाइल फोन और सेवा से जुड़े दस्तावेज़।",
            "en": "Your original Aadhaar, your mobile phone and any documents the service needs.",
        },
    },
    {
        "q": {"hi": "क्या मैं पहले से अपॉइंटमेंट ले सकता हूँ?", "en": "Can I book in advance?"},
        "a": {
            "hi": "हाँ, नीचे दिया गया फॉर्म भरें या WhatsApp करें, हम आपको समय बता देंगे।",
            "en": "Yes. Fill in the form below or message us on WhatsApp and we will give you a slot.",
        },
    },
]

NAV_LINKS: Final[list[tuple[str, dict[str, str]]]] = [
    ("home", {"hi": "होम", "en": "Home"}),
    ("services", {"hi": "सेवाएँ", "en": "Services"}),
    ("why-choose-us", {"hi": "हमें क्यों चुनें", "en": "Why us"}),
    ("inquiry-form", {"hi": "संपर्क करें", "en": "Contact us"}),
    ("contact", {"hi": "पता", "en": "Address"}),
]

# ---------------------------------------------------------------------------
# UI strings
# ---------------------------------------------------------------------------

UI_TEXT: Final[dict[str, dict[str, str]]] = {
    "call": {"hi": "कॉल करें", "en": "Call us"},
    "whatsapp": {"hi": "WhatsApp करें", "en": "WhatsApp us"},
    "official_login": {"hi": "Official Login", "en": "Official Login"},
    "services_title": {"hi": "🛠️ हमारी सेवाएँ", "en": "🛠️ Our services"},
    "why_title": {"hi": "हमें क्यों चुनें? 💯", "en": "Why choose us? 💯"},
    "faq_title": {"hi": "अक्सर पूछे जाने वाले प्रश्न", "en": "Frequently asked questions"},
    "contact_title": {"hi": "हमारा पता 📍", "en": "Find us 📍"},
    "contact_sub": {
        "hi": "आज ही पधारें और अपना काम चुटकियों में करवाएँ!",
        "en": "Drop in today and get your work done in no time!",
    },
    "scan_whatsapp": {"hi": "WhatsApp के लिए स्कैन करें", "en": "Scan to chat on WhatsApp"},
    "form_title": {"hi": "पूछताछ फॉर्म", "en": "Inquiry form"},
    "inquiry_type": {"hi": "पूछताछ का प्रकार *", "en": "Inquiry type *"},
    "type_contact": {"hi": "सामान्य संपर्क", "en": "General contact"},
    "type_service": {"hi": "सेवा अनुरोध", "en": "Service request"},
    "service_category": {"hi": "सेवा श्रेणी (वैकल्पिक)", "en": "Service category (optional)"},
    "name": {"hi": "नाम *", "en": "Name *"},
    "phone": {"hi": "फोन नंबर *", "en": "Phone number *"},
    "email": {"hi": "ईमेल (वैकल्पिक)", "en": "Email (optional)"},
    "message": {"hi": "संदेश / विवरण *", "en": "Message / details *"},
    "submit": {"hi": "भेजें", "en": "Send"},
    "submit_ok": {
        "hi": "धन्यवाद! आपका संदेश सफलतापूर्वक भेज दिया गया है। हम जल्द ही आपसे संपर्क करेंगे।",
        "en": "Thank you! Your message has been sent. We will contact you soon.",
    },
    "submit_failed": {
        "hi": "संदेश भेजने में त्रुटि हुई। कृपया दोबारा प्रयास करें।",
        "en": "Could not send your message. Please try again.",
    },
    "err_name": {"hi": "कृपया अपना नाम दर्ज करें", "en": "Please enter your name"},
    "err_phone_required": {"hi": "कृपया अपना फोन नंबर दर्ज करें", "en": "Please enter your phone number"},
    "err_phone_invalid": {
        "hi": "कृपया सही फोन नंबर दर्ज करें (10 अंक)",
        "en": "Please enter a valid 10-digit mobile number",
    },
    "err_email": {"hi": "कृपया सही ईमेल दर्ज करें", "en": "Please enter a valid email"},
    "err_message": {"hi": "कृपया अपना संदेश दर्ज करें", "en": "Please enter a message"},
    "login_title": {"hi": "Official Login", "en": "Official Login"},
    "login_prompt": {
        "hi": "कृपया अपनी उपयोगकर्ता आईडी और पासवर्ड दर्ज करें",
        "en": "Please enter your user id and password",
    },
    "user_id": {"hi": "User ID", "en": "User ID"},
    "password": {"hi": "Password", "en": "Password"},
    "login": {"hi": "लॉगिन", "en": "Log in"},
    "login_failed": {
        "hi": "अमान्य उपयोगकर्ता आईडी या पासवर्ड। कृपया पुनः प्रयास करें।",
        "en": "Invalid user id or password. Please try again.",
    },
    "logout": {"hi": "लॉगआउट", "en": "Log out"},
    "retry": {"hi": "पुनः प्रयास करें", "en": "Retry"},
    "admin_title": {"hi": "Admin Panel", "en": "Admin Panel"},
    "connecting": {"hi": "सर्वर से जुड़ रहे हैं...", "en": "Connecting to the inquiry store..."},
    "init_failed": {"hi": "एडमिन सत्र शुरू नहीं हो सका", "en": "Could not start the admin session"},
    "fetch_failed": {"hi": "पूछताछ लोड नहीं हो सकीं", "en": "Could not load inquiries"},
    "all": {"hi": "सभी", "en": "All"},
    "unread": {"hi": "अपठित", "en": "Unread"},
    "read": {"hi": "पढ़े गए", "en": "Read"},
    "new_badge": {"hi": "नया", "en": "New"},
    "search": {"hi": "नाम या फोन से खोजें", "en": "Search by name or phone"},
    "kind_filter": {"hi": "प्रकार", "en": "Type"},
    "category_filter": {"hi": "श्रेणी", "en": "Category"},
    "any": {"hi": "कोई भी", "en": "Any"},
    "mark_read": {"hi": "पढ़ा हुआ चिह्नित करें", "en": "Mark as read"},
    "mark_unread": {"hi": "अपठित चिह्नित करें", "en": "Mark as unread"},
    "delete": {"hi": "हटाएँ", "en": "Delete"},
    "deleted": {"hi": "पूछताछ हटा दी गई", "en": "Inquiry deleted"},
    "bulk_read": {"hi": "चुनी गई पढ़ी हुई करें", "en": "Mark selected read"},
    "bulk_unread": {"hi": "चुनी गई अपठित करें", "en": "Mark selected unread"},
    "bulk_partial": {
        "hi": "कुछ पूछताछ अपडेट नहीं हो सकीं",
        "en": "Some inquiries could not be updated",
    },
    "no_inquiries": {"hi": "कोई पूछताछ नहीं मिली", "en": "No inquiries found"},
    "demo_note": {
        "hi": "यह एक डेमो रिकॉर्ड है, असली पूछताछ नहीं।",
        "en": "This is a demo record, not a real inquiry.",
    },
    "export_csv": {"hi": "CSV डाउनलोड", "en": "Download CSV"},
    "export_json": {"hi": "JSON डाउनलोड", "en": "Download JSON"},
    "refresh": {"hi": "रीफ़्रेश", "en": "Refresh"},
    "internal": {"hi": "आंतरिक", "en": "Internal"},
    "internal_title": {"hi": "आंतरिक पूछताछ जोड़ें", "en": "Add internal inquiry"},
    "rights": {"hi": "सर्वाधिकार सुरक्षित", "en": "All rights reserved"},
}


def tr(key: str, lang: str) -> str:
    """Translate a UI string id; unknown ids come back unchanged."""
    entry = UI_TEXT.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry["hi"]
