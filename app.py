import asyncio
from typing import Optional

import streamlit as st

from skin_viewer import (
    BodyType,
    SkinViewer,
    SkinViewerError,
    ViewerConfig,
    classify,
)
from skin_viewer.loader import load_texture
from skin_viewer.types import TextureSource

st.set_page_config(layout="centered", page_title="Skin Viewer")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        img { image-rendering: pixelated; }
    </style>
""",
    unsafe_allow_html=True,
)


@st.dialog("Error")
def alert_modal(message: str) -> None:
    st.write(message)
    if st.button("OK", use_container_width=True):
        st.rerun()


def get_source() -> Optional[TextureSource]:
    uploaded = st.file_uploader("Skin texture", type=["png"])
    if uploaded is not None:
        return uploaded.getvalue()
    address = st.text_input("...or texture URL / path", value="")
    return address.strip() or None


# --------- Main App ---------

st.title("Skin Viewer")

source = get_source()
body_type = st.radio(
    "Body type",
    [BodyType.CLASSIC.value, BodyType.SLIM.value],
    horizontal=True,
)
scale = st.slider("Scale", min_value=1, max_value=16, value=8)

if st.button("Generate", disabled=source is None, use_container_width=True):
    viewer = SkinViewer(ViewerConfig(scale=scale))
    try:
        data_url = asyncio.run(viewer.generate(source, body_type))
    except SkinViewerError as exc:
        alert_modal(str(exc))
    else:
        st.image(data_url)
        with st.expander("Texture"):
            texture = load_texture(source)
            st.caption(f"Format: {classify(texture)}")
            st.image(texture, use_container_width=True)
