"""GitHub profile lookup with a Streamlit front end."""
