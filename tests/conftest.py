import pytest
from streamlit.delta_generator_singletons import (
    context_dg_stack,
    get_dg_singleton_instance,
)


@pytest.fixture(autouse=True)
def _reset_streamlit_bare_mode_state():
    # Importing streamlit_app outside a Streamlit runtime (bare mode) runs its
    # `with st.form(...)` block against the process-wide main container, which
    # leaves that container marked as inside "profit_form" and the context
    # stack pointing at it. Restore both so AppTest runs in later tests do not
    # see a stale enclosing form.
    main_dg = get_dg_singleton_instance().main_dg
    main_dg._form_data = None
    context_dg_stack.set((main_dg,))
    yield
