"""Custom CSS styling for the AI Study Assistant Gradio UI"""

custom_css = """
/* LAYOUT */
.gradio-container {
    max-width: 960px !important;
    width: 100% !important;
    margin: 0 auto !important;
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif !important;
}

footer { visibility: hidden !important; }

/* HEADER */
#app-title h1 {
    text-align: center;
    font-weight: 700 !important;
    background: linear-gradient(90deg, #0284c7, #06b6d4, #0d9488);
    -webkit-background-clip: text;
    background-clip: text;
    color: transparent !important;
}

.dark #app-title h1 {
    background: linear-gradient(90deg, #38bdf8, #67e8f9, #2dd4bf);
    -webkit-background-clip: text;
    background-clip: text;
}

/* ERROR BANNER */
#error-banner {
    border: 1px solid #f87171;
    background: #fee2e2;
    border-radius: 12px;
    padding: 12px 16px;
}

#error-banner p { color: #b91c1c !important; margin: 0; }

.dark #error-banner { background: #7f1d1d; border-color: #450a0a; }
.dark #error-banner p { color: #fee2e2 !important; }

/* WELCOME PANEL */
#welcome-panel {
    border-radius: 16px;
    padding: 24px;
    box-shadow: 0 10px 25px rgba(0, 0, 0, 0.15);
}

#welcome-question p {
    text-align: center;
    font-size: 1.4rem;
    font-weight: 600;
}

/* LOADING */
#loading-indicator p { text-align: center; font-size: 1.1rem; }

/* TOOL SELECTOR */
#tool-selector .wrap { gap: 8px !important; justify-content: center; }

/* TOOL VIEW */
#tool-view pre {
    font-family: 'SF Mono', Menlo, Consolas, monospace !important;
    line-height: 1.4 !important;
}

#tool-view details {
    margin-top: 8px;
    padding: 8px 12px;
    border-radius: 8px;
    background: rgba(14, 165, 233, 0.08);
}

#app-footer p { text-align: center; font-size: 0.85rem; opacity: 0.7; }
"""
