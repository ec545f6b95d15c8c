"""HTML page rendering with a browser-side rotation handler."""

import html
from pathlib import Path

from ..config import WheelConfig
from .surface import SvgSurface


def _stylesheet(config: WheelConfig) -> str:
    return f"""
    html, body {{ margin: 0; padding: 0; height: 100%; overflow: hidden; background: #ffffff; }}
    #container {{ width: 100vw; height: 100vh; display: flex; align-items: center;
                  justify-content: center; touch-action: none; user-select: none; }}
    #container svg {{ width: 100%; height: 100%; max-width: {config.size:g}px; }}
    svg.rotatable {{ cursor: grab; animation: wheel-intro 1.5s ease-out; }}
    svg.rotatable:active {{ cursor: grabbing; }}
    @keyframes wheel-intro {{ from {{ transform: rotate(-90deg); }} to {{ transform: rotate(0deg); }} }}
    #color path {{ opacity: 0.35; }}
    .outline {{ fill: none; stroke: #555555; stroke-width: 2; }}
    .spoke {{ stroke: #555555; stroke-width: 1; }}
    .midline {{ fill: none; stroke: none; }}
    .label {{ font-family: sans-serif; font-size: 16px; dominant-baseline: middle; text-anchor: middle; }}
    #inner .label {{ font-size: 22px; font-weight: bold; }}
    #middle .label {{ font-size: 18px; }}
"""


def _rotation_script(config: WheelConfig) -> str:
    """Rotation handler for the browser.

    Mirrors radial_wheel.interaction.RotationController: same modes, same wrapped
    pointer deltas, same decay factor and stop threshold.
    """
    return f"""
    <script type="text/javascript">
    (function() {{
        var DECAY = {config.decay!r};
        var STOP_THRESHOLD = {config.stop_threshold!r};

        function addRotationHandler(svg, container) {{
            var mode = 'idle';
            var previousAngle = 0;
            var currentRotation = 0;
            var velocity = 0;
            var animationFrame = null;

            function readPointer(event) {{
                var source = event;
                if (event.touches) {{
                    if (event.touches.length === 0) return null;
                    source = event.touches[0];
                }}
                if (typeof source.clientX !== 'number' || typeof source.clientY !== 'number') return null;
                if (!isFinite(source.clientX) || !isFinite(source.clientY)) return null;
                return {{x: source.clientX, y: source.clientY}};
            }}

            function pointerAngle(point) {{
                var rect = svg.getBoundingClientRect();
                var centerX = rect.left + rect.width / 2;
                var centerY = rect.top + rect.height / 2;
                return Math.atan2(point.y - centerY, point.x - centerX) * 180 / Math.PI;
            }}

            function wrapDegrees(delta) {{
                return ((delta + 180) % 360 + 360) % 360 - 180;
            }}

            function rotateSvg(angle) {{
                svg.style.transform = 'rotate(' + angle + 'deg)';
            }}

            function cancelTick() {{
                if (animationFrame !== null) {{
                    cancelAnimationFrame(animationFrame);
                    animationFrame = null;
                }}
            }}

            function stop() {{
                cancelTick();
                mode = 'idle';
                velocity = 0;
            }}

            function schedule() {{
                cancelTick();
                animationFrame = requestAnimationFrame(tick);
            }}

            function tick() {{
                animationFrame = null;
                if (mode !== 'coasting') return;
                currentRotation += velocity;
                rotateSvg(currentRotation);
                velocity *= DECAY;
                if (Math.abs(velocity) < STOP_THRESHOLD) {{
                    stop();
                }} else {{
                    schedule();
                }}
            }}

            function startDrag(event) {{
                var point = readPointer(event);
                if (point === null) return;
                cancelTick();
                mode = 'dragging';
                previousAngle = pointerAngle(point);
                velocity = 0;
                svg.style.animation = 'none';
            }}

            function drag(event) {{
                if (mode !== 'dragging') return;
                var point = readPointer(event);
                if (point === null) return;
                event.preventDefault();
                var angle = pointerAngle(point);
                var delta = wrapDegrees(angle - previousAngle);
                previousAngle = angle;
                currentRotation += delta;
                rotateSvg(currentRotation);
                velocity = delta;
            }}

            function endDrag() {{
                if (mode !== 'dragging') return;
                if (Math.abs(velocity) < STOP_THRESHOLD) {{
                    stop();
                    return;
                }}
                mode = 'coasting';
                schedule();
            }}

            container.addEventListener('mousedown', startDrag);
            container.addEventListener('mousemove', drag);
            container.addEventListener('mouseup', endDrag);
            container.addEventListener('mouseleave', endDrag);
            container.addEventListener('touchstart', startDrag);
            container.addEventListener('touchmove', drag, {{passive: false}});
            container.addEventListener('touchend', endDrag);
            container.addEventListener('touchcancel', endDrag);
        }}

        document.addEventListener('DOMContentLoaded', function() {{
            var svg = document.querySelector('#container svg');
            if (!svg) return;
            svg.classList.add('rotatable');
            addRotationHandler(svg, svg.parentElement);
        }});
    }})();
    </script>
"""


def render_html(
    surface: SvgSurface,
    output_path: Path,
    config: WheelConfig | None = None,
    title: str = "Wheel",
) -> None:
    """Write a standalone HTML page showing the wheel drawn on ``surface``.

    The page includes the stylesheet and a drag-to-rotate handler with inertial
    coasting.

    Args:
        surface: Surface the wheel was built on.
        output_path: Path to write the HTML file.
        config: Decay factor, stop threshold and canvas size. Defaults to WheelConfig().
        title: Page title.
    """
    config = config or WheelConfig()
    page = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{html.escape(title)}</title>
<style>{_stylesheet(config)}</style>
</head>
<body>
<div id="container">
{surface.to_string()}
</div>
{_rotation_script(config)}
</body>
</html>
"""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(page)
