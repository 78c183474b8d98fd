# frontend/streamlit_app/views/home.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit view: public marketing page.

Sections, top to bottom: hero (call / WhatsApp / official login), services
(one expander per department item), why choose us, mission & vision, FAQ,
inquiry form, contact with a WhatsApp QR code, footer. All copy comes from
`core.constants` in the active language.
"""

from datetime import date

import streamlit as st

from core.constants import BUSINESS, FAQ, HERO, MISSION, SERVICES, VISION, WHY_CHOOSE_US, pick, tr
from services.qrprint import make_qr_png, tel_link, whatsapp_link
from ui.layout import section
from views import inquiry_form, login


@st.cache_data(show_spinner=False)
def _whatsapp_qr(url: str) -> bytes:
    return make_qr_png(url)


def _hero(ctx: dict) -> None:
    lang, cfg = ctx["lang"], ctx["settings"]
    st.title(f"✨ {pick(BUSINESS['name'], lang)} ✨", anchor="home")
    st.subheader(f"🇮🇳 {pick(BUSINESS['tagline'], lang)} ✅")
    st.write(f"🙏 {pick(HERO['description'], lang)}")
    c1, c2, c3 = st.columns([1, 1, 2])
    with c1:
        st.link_button(f"📞 {tr('call', lang)}", tel_link(cfg.BUSINESS_PHONE), use_container_width=True)
    with c2:
        st.link_button(f"💬 {tr('whatsapp', lang)}", whatsapp_link(cfg.BUSINESS_WHATSAPP), use_container_width=True)
    with c3:
        login.render(ctx)
    st.caption(f"📍 {pick(BUSINESS['location'], lang)}")


def _services(lang: str) -> None:
    section("services", tr("services_title", lang))
    for service in SERVICES:
        with st.container(border=True):
            st.markdown(f"#### {service['icon']} {pick(service['category'], lang)}")
            st.caption(pick(service["subtitle"], lang))
            for item in service["items"]:
                with st.expander(pick(item["title"], lang)):
                    st.markdown("\n".join(f"- ✓ {pick(d, lang)}" for d in item["details"]))


def _why_choose_us(lang: str) -> None:
    section("why-choose-us", tr("why_title", lang))
    cols = st.columns(len(WHY_CHOOSE_US))
    for col, reason in zip(cols, WHY_CHOOSE_US):
        with col:
            st.markdown(f"### {reason['icon']}\n**{pick(reason['title'], lang)}**")
            st.caption(pick(reason["text"], lang))


def _mission_vision(lang: str) -> None:
    left, right = st.columns(2)
    for col, block, icon in ((left, MISSION, "🏆"), (right, VISION, "🔭")):
        with col, st.container(border=True):
            st.markdown(f"#### {icon} {pick(block['title'], lang)}")
            st.write(pick(block["content"], lang))


def _faq(lang: str) -> None:
    section("faq", tr("faq_title", lang))
    for entry in FAQ:
        with st.expander(pick(entry["q"], lang)):
            st.write(pick(entry["a"], lang))


def _contact(ctx: dict) -> None:
    lang, cfg = ctx["lang"], ctx["settings"]
    section("contact", tr("contact_title", lang), tr("contact_sub", lang))
    info, qr = st.columns([2, 1])
    with info:
        st.markdown(
            f"**{pick(BUSINESS['name'], lang)}**  \n"
            f"📍 {pick(BUSINESS['full_address'], lang)}  \n"
            f"👨‍💼 {pick(BUSINESS['operator'], lang)}  \n"
            f"📞 [{cfg.BUSINESS_PHONE}]({tel_link(cfg.BUSINESS_PHONE)})  \n"
            f"📧 {cfg.BUSINESS_EMAIL}"
        )
    with qr:
        st.image(_whatsapp_qr(whatsapp_link(cfg.BUSINESS_WHATSAPP)), caption=tr("scan_whatsapp", lang), width=180)


def render(ctx: dict) -> None:
    lang = ctx["lang"]
    _hero(ctx)
    st.divider()
    _services(lang)
    st.divider()
    _why_choose_us(lang)
    _mission_vision(lang)
    st.divider()
    _faq(lang)
    st.divider()
    section("inquiry-form", tr("form_title", lang))
    inquiry_form.render(ctx)
    st.divider()
    _contact(ctx)
    st.divider()
    st.caption(f"© {date.today().year} {pick(BUSINESS['name'], lang)}. {tr('rights', lang)}.")
