"""
Interior Studio - UI Styles
UI style definitions
"""

CUSTOM_CSS = """
/* Global Theme - Full Width */
.gradio-container {
    max-width: 100% !important;
    width: 100% !important;
    padding-left: 24px !important;
    padding-right: 24px !important;
    margin: 0 !important;
}

/* Header Styling */
.header-row {
    background: linear-gradient(135deg, #3a4a5c 0%, #8a6f4e 100%);
    padding: 16px 28px;
    border-radius: 16px;
    margin-bottom: 16px;
    box-shadow: 0 10px 40px rgba(58, 74, 92, 0.3);
    align-items: center;
}

#app-header h1 {
    color: white !important;
    font-size: 2.2em !important;
    margin: 0 !important;
    text-shadow: 2px 2px 4px rgba(0,0,0,0.2);
}

#app-header p {
    color: rgba(255,255,255,0.9) !important;
    margin: 4px 0 0 0 !important;
}

.header-controls {
    justify-content: center;
}

#lang-btn {
    background: rgba(255,255,255,0.15) !important;
    color: white !important;
    border: 1px solid rgba(255,255,255,0.4) !important;
    border-radius: 20px !important;
    white-space: nowrap;
}

/* Control Panel */
.control-panel {
    max-height: calc(100vh - 160px);
    overflow-y: auto;
    padding-right: 8px;
}

.preset-btn {
    border-radius: 20px !important;
    font-weight: 600 !important;
}

/* Style Gallery */
.style-gallery .thumbnail-item {
    border-radius: 8px !important;
}

.style-gallery .thumbnail-item.selected {
    box-shadow: 0 0 0 3px #8a6f4e !important;
}

/* Generate Button */
#generate-btn {
    background: linear-gradient(135deg, #3a4a5c 0%, #8a6f4e 100%) !important;
    color: white !important;
    font-size: 1.15em !important;
    margin-top: 12px;
}

#generate-btn:disabled {
    opacity: 0.6;
    cursor: wait;
}

/* Result Panel */
.result-panel {
    position: sticky;
    top: 16px;
    align-self: flex-start;
}

#status-line {
    min-height: 1.5em;
}

/* Footer */
.footer {
    text-align: center;
    padding: 16px;
    color: #888;
    font-size: 0.9em;
}
"""
