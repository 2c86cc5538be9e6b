# Define a static color class for consistent use across the app


class Colors:
    # App bar
    header = "#676693"  # Dusky indigo
    header_text = "#ffffff"

    # Surfaces
    background = "#d9eecad2"  # Pale mint, slightly translucent
    form = "#87c55ecd"  # Leaf green card behind the search box
    form_border = "#514e51"
    input_border = "#0f0f0f"

    # Actions
    button = "#8c88f7"  # Periwinkle
    button_text = "#ffffff"

    # Text
    placeholder = "#716c76"
    input_text = "#0e0d0d"
    result_text = "#2B2968"  # Deep navy for result lines


APP_CSS = f"""
<style>
.stApp {{
    background-color: {Colors.background};
}}
header[data-testid="stHeader"] {{
    background-color: {Colors.header};
}}
.app-bar {{
    background-color: {Colors.header};
    color: {Colors.header_text};
    font-family: serif;
    font-weight: bold;
    font-size: 24px;
    text-align: center;
    padding: 20px 0;
    border-radius: 8px;
    margin-bottom: 12px;
}}
div[data-testid="stForm"] {{
    background-color: {Colors.form};
    border: 2px solid {Colors.form_border};
    border-radius: 10px;
}}
div[data-testid="stForm"] input {{
    background-color: {Colors.background};
    color: {Colors.input_text};
    border: 1px solid {Colors.input_border};
    font-size: 16px;
}}
div[data-testid="stForm"] input::placeholder {{
    color: {Colors.placeholder};
}}
div[data-testid="stFormSubmitButton"] button {{
    background-color: {Colors.button};
    color: {Colors.button_text};
    font-size: 18px;
    font-weight: bold;
}}
.result-card {{
    border: 1px solid {Colors.input_border};
    border-radius: 8px;
    padding: 0 10px 10px 10px;
}}
.result-text {{
    font-size: 20px;
    color: {Colors.result_text};
    margin-top: 10px;
    text-align: left;
}}
</style>
"""
