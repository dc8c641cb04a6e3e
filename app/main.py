import sys
import os
import logging
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from theater.config import get_config
from theater.service import StatementService
from theater.transforms import load_seed


# ============ Кэширование данных ============
@st.cache_data
def get_data():
    return load_seed("data/theater.json")


# ============ Инициализация ============
config = get_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Theater Statements",
    page_icon="🎭",
    layout="wide",
)

plays, invoices = get_data()
service = StatementService(plays, config)


# ============ HEADER ============
st.title("🎭 Счета театра")
st.caption(f"📚 Пьес в каталоге: {len(plays)} | 🧾 Счетов: {len(invoices)}")

# ============ SIDEBAR - выбор счёта ============
with st.sidebar:
    st.header("🧾 Счета")
    if not invoices:
        st.warning("В data/theater.json нет счетов")
        st.stop()
    customer = st.radio(
        "Клиент:",
        [inv.customer for inv in invoices],
        label_visibility="collapsed",
    )

invoice = next(inv for inv in invoices if inv.customer == customer)

# ============ Текст счёта ============
result = service.try_statement(invoice)

if result.is_left:
    st.error(f"❌ Ошибка: {result.value}")
    st.stop()

tab1, tab2 = st.tabs(["📄 Statement", "📊 Детали"])

with tab1:
    st.code(result.get_or_else(""), language="text")

with tab2:
    data = service.statement_data(invoice)

    col1, col2 = st.columns(2)
    with col1:
        st.metric("💰 К оплате", data["total_amount"])
    with col2:
        st.metric("⭐ Баллы", data["total_volume_credits"])

    st.divider()
    st.dataframe(data["lines"], use_container_width=True)
