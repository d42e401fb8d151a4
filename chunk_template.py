import html
from string import Template

HTML_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>${file_name} - part ${current_chunk}</title>
    <style>
        :root {
            --left-bg: #f5f5f5;
            --center-bg: #ffffff;
            --right-bg: #f5f5f5;
            --center-max-width: 1000px;
        }
        /* side colors outside the centered column, center color inside it */
        body {
            --g-left: calc(50% - var(--center-max-width) / 2);
            --g-right: calc(50% + var(--center-max-width) / 2);
            background: linear-gradient(to right,
                        var(--left-bg) 0px var(--g-left),
                        var(--center-bg) var(--g-left) var(--g-right),
                        var(--right-bg) var(--g-right) 100%);
            color: #333;
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            padding: 20px;
            margin: 0;
            font-size: 16px;
        }
        .controls {
            margin-bottom: 20px;
            padding: 15px;
            background-color: #f5f5f5;
            border-radius: 8px;
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
            align-items: center;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .control-section {
            display: flex;
            flex-direction: column;
            gap: 8px;
        }
        .control-group {
            display: flex;
            gap: 10px;
            align-items: center;
        }
        button {
            background-color: #e0e0e0;
            color: #333;
            border: none;
            padding: 8px 16px;
            border-radius: 4px;
            cursor: pointer;
            transition: background-color 0.3s;
            font-size: 16px;
        }
        button:hover {
            background-color: #ccc;
        }
        .page-center {
            max-width: var(--center-max-width);
            margin: 0 auto;
            padding: 20px;
        }
        .content {
            white-space: pre-wrap;
            word-wrap: break-word;
            padding: 25px;
            border-radius: 8px;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
            min-height: 300px;
            transition: background-color 0.3s, color 0.3s, line-height 0.3s;
            line-height: 1.6;
            background-color: var(--center-bg);
        }
        .chunk-info {
            color: #666;
            font-size: 0.9em;
            margin-top: 10px;
            width: 100%;
            text-align: right;
        }
        .color-preview {
            width: 20px;
            height: 20px;
            border-radius: 4px;
            border: 1px solid rgba(0,0,0,0.12);
            box-shadow: 0 1px 2px rgba(0,0,0,0.05);
            display: inline-block;
            vertical-align: middle;
        }
        .display-value {
            min-width: 50px;
            text-align: center;
        }
    </style>
</head>
<body>
    <div class="controls">
        <div class="control-section">
            <span>Font size</span>
            <div class="control-group">
                <button onclick="changeFontSize(-1)">A-</button>
                <span id="fontSizeDisplay" class="display-value">16px</span>
                <button onclick="changeFontSize(1)">A+</button>
            </div>
        </div>

        <div class="control-section">
            <span>Line height</span>
            <div class="control-group">
                <button onclick="changeLineHeight(-0.2)">LH-</button>
                <span id="lineHeightDisplay" class="display-value">1.6</span>
                <button onclick="changeLineHeight(0.2)">LH+</button>
            </div>
        </div>

        <div class="control-section">
            <span>Text color</span>
            <div class="control-group">
                <select id="textColorSelect" aria-label="Text color">
                    <option value="#111111">Black (#111111)</option>
                    <option value="#2F4F4F">Dark slate gray, eye-friendly (#2F4F4F)</option>
                    <option value="#333333" selected>Default dark gray (#333333)</option>
                    <option value="#444444">Medium gray (#444444)</option>
                    <option value="#5B4636">Warm brown, eye-friendly (#5B4636)</option>
                    <option value="#0066cc">Dark blue (#0066cc)</option>
                    <option value="#006600">Dark green, eye-friendly (#006600)</option>
                    <option value="#8a2be2">Purple (#8a2be2)</option>
                    <option value="#6B4423">Soft brown, eye-friendly (#6B4423)</option>
                    <option value="#4A4A4A">Soft dark gray (#4A4A4A)</option>
                </select>
                <span id="textColorPreview" class="color-preview" style="background:#333"></span>
            </div>
        </div>

        <div class="control-section">
            <span>Background color</span>
            <div style="display:flex;flex-direction:column;gap:8px;">
                <div class="control-group">
                    <span>Center</span>
                    <select id="centerColorSelect" aria-label="Center background color">
                        <option value="#ffffff" selected>White (#ffffff)</option>
                        <option value="#fffdf0">Warm white (#fffdf0)</option>
                        <option value="#fffbe6">Soft cream (#fffbe6)</option>
                        <option value="#ffffee">Light yellow (#ffffee)</option>
                        <option value="#f7fff7">Light green (#f7fff7)</option>
                        <option value="#f6f9ff">Light blue (#f6f9ff)</option>
                    </select>
                    <span id="centerColorPreview" class="color-preview" style="background:#ffffff;margin-left:8px"></span>
                </div>
                <div class="control-group">
                    <span>Left</span>
                    <select id="leftColorSelect" aria-label="Left background color">
${side_options}
                    </select>
                    <span id="leftColorPreview" class="color-preview" style="background:#f5f5f5;margin-left:8px"></span>
                </div>
                <div class="control-group">
                    <span>Right</span>
                    <select id="rightColorSelect" aria-label="Right background color">
${side_options}
                    </select>
                    <span id="rightColorPreview" class="color-preview" style="background:#f5f5f5;margin-left:8px"></span>
                </div>
            </div>
        </div>

        <div class="chunk-info" id="chunkInfo">
            ${current_chunk} / ${total_chunks}
        </div>
    </div>

    <div class="page-center">
        <div class="content" id="mainContent">${content}</div>
    </div>

    <script>
        document.addEventListener('DOMContentLoaded', function() {
            const contentElement = document.getElementById('mainContent');
            let currentFontSize = 16;
            let currentLineHeight = 1.6;

            const centerColorSelect = document.getElementById('centerColorSelect');
            const centerColorPreview = document.getElementById('centerColorPreview');
            centerColorSelect.addEventListener('change', function() {
                const c = this.value;
                document.documentElement.style.setProperty('--center-bg', c);
                contentElement.style.backgroundColor = c;
                centerColorPreview.style.background = c;
            });

            const leftColorSelect = document.getElementById('leftColorSelect');
            const rightColorSelect = document.getElementById('rightColorSelect');
            const leftPreview = document.getElementById('leftColorPreview');
            const rightPreview = document.getElementById('rightColorPreview');
            leftColorSelect.addEventListener('change', function() {
                const c = this.value;
                document.documentElement.style.setProperty('--left-bg', c);
                leftPreview.style.background = c;
            });
            rightColorSelect.addEventListener('change', function() {
                const c = this.value;
                document.documentElement.style.setProperty('--right-bg', c);
                rightPreview.style.background = c;
            });

            const textColorSelect = document.getElementById('textColorSelect');
            const textColorPreview = document.getElementById('textColorPreview');
            textColorSelect.addEventListener('change', function() {
                const c = this.value;
                contentElement.style.color = c;
                textColorPreview.style.background = c;
            });

            window.changeFontSize = function(change) {
                currentFontSize += change;
                if (currentFontSize < 10) currentFontSize = 10;
                if (currentFontSize > 36) currentFontSize = 36;
                contentElement.style.fontSize = currentFontSize + "px";
                document.getElementById("fontSizeDisplay").textContent = currentFontSize + "px";
            };

            window.changeLineHeight = function(change) {
                // round to avoid drift from repeated 0.2 steps
                currentLineHeight = Math.round((currentLineHeight + change) * 10) / 10;
                if (currentLineHeight < 0.8) currentLineHeight = 0.8;
                if (currentLineHeight > 3.0) currentLineHeight = 3.0;
                contentElement.style.lineHeight = currentLineHeight;
                document.getElementById("lineHeightDisplay").textContent = currentLineHeight.toFixed(1);
            };
        });
    </script>
</body>
</html>
""")

SIDE_COLORS = [
    ("#f5f5f5", "Light gray"),
    ("#ffffff", "White"),
    ("#fffdf0", "Warm white, eye-friendly"),
    ("#fffbe6", "Soft cream, eye-friendly"),
    ("#ffffee", "Light yellow, eye-friendly"),
    ("#f7fff7", "Light green, eye-friendly"),
    ("#f0fff0", "Honeydew"),
    ("#f6f9ff", "Light blue, eye-friendly"),
    ("#f7f0ff", "Light purple"),
    ("#eeeae0", "Beige gray"),
]


class TemplateRenderError(ValueError):
    pass


def side_color_options(selected="#f5f5f5"):
    options = []
    for value, label in SIDE_COLORS:
        mark = " selected" if value == selected else ""
        options.append(f'                        <option value="{value}"{mark}>{label} ({value})</option>')
    return "\n".join(options)


SIDE_OPTIONS = side_color_options()


def render_chunk(content: str, file_name: str, total_chunks: int, current_chunk: int) -> bytes:
    # content is already escaped line by line; only the file name needs it here
    try:
        document = HTML_TEMPLATE.substitute(
            content=content,
            file_name=html.escape(file_name),
            total_chunks=total_chunks,
            current_chunk=current_chunk,
            side_options=SIDE_OPTIONS,
        )
    except (KeyError, ValueError) as e:
        raise TemplateRenderError(f"Cannot render chunk {current_chunk}: {e}") from e
    return document.encode('utf-8')


def template_overhead(file_name: str, total_chunks: int, current_chunk: int) -> int:
    """Size in bytes of a rendered chunk with no content."""
    return len(render_chunk("", file_name, total_chunks, current_chunk))
