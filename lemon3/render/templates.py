from __future__ import annotations

PAGE_STYLE = """
      body {
        font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
        font-size: 16px;
        line-height: 1.6;
        background-color: #fefefe;
        color: #222;
        padding: 1rem;
        max-width: 100%;
        margin: auto;
        box-sizing: border-box;
      }
      h1 { font-size: 1.4em; margin-bottom: 0.5em; }
      h2 { font-size: 1.1em; margin-top: 1.5em; margin-bottom: 0.5em; border-bottom: 1px solid #eee; padding-bottom: 0.3em; }
      .meta { font-size: 0.9em; color: #666; margin-bottom: 1em; overflow-wrap: anywhere; }
      .download {
        display: inline-block;
        background-color: #f9e231;
        color: #111;
        font-weight: bold;
        text-decoration: none;
        padding: 0.4em 0.8em;
        border-radius: 6px;
        margin-top: 0.5em;
        white-space: nowrap;
      }
      .download:hover { background-color: #f7da00; }
      .raw-json {
        font-size: 0.75em;
        max-height: 200px;
        overflow: auto;
        background: #fafafa;
        border: 1px solid #eee;
        padding: 1em;
        border-radius: 6px;
      }
      details summary { font-weight: bold; cursor: pointer; margin-top: 1.5rem; }
      a { color: #0066cc; word-break: break-word; }
      video, img.artwork {
        width: 100%;
        max-width: 100%;
        border-radius: 12px;
        box-shadow: 0 2px 6px rgba(0,0,0,0.1);
        margin: 1.2rem 0;
      }
      header { display: flex; align-items: center; gap: 0.5rem; margin-bottom: 1rem; }
      header img { height: 28px; }
      .cid { margin-top: 2rem; font-size: 0.75em; color: #aaa; text-align: center; }
"""

# Rendered with `m` (RenderModel) plus `frame_embed`, `debug_json`, `app`, `style`.
PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>{{ m.title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta property="og:title" content="{{ m.title }}" />
  <meta property="og:description" content="{{ m.og_description }}" />
  {%- if m.media_kind == "audio" %}
  <meta property="og:audio" content="{{ m.download_url }}" />
  {%- endif %}
  {%- if m.media_kind == "video" %}
  <meta property="og:video" content="{{ m.download_url }}" />
  {%- endif %}
  {%- if m.artwork_url %}
  <meta property="og:image" content="{{ m.artwork_url }}" />
  {%- endif %}
  <meta name="fc:frame" content='{{ frame_embed }}' />
  <style>{{ style }}</style>
</head>
<body>
  <header>
    <img src="{{ app.icon_url }}" alt="{{ app.name }}">
    <strong>{{ app.name }}</strong>
  </header>
{% if m.media_kind == "video" %}
  <video controls poster="{{ m.artwork_url or '' }}" src="{{ m.download_url }}" type="{{ m.mime_type }}">
    Your browser does not support the video tag.
    <a href="{{ m.download_url }}">Download video</a>.
  </video>
{%- elif m.media_kind == "audio" %}
  {%- if m.artwork_url %}
  <img class="artwork" src="{{ m.artwork_url }}" alt="Artwork">
  {%- endif %}
  <audio controls src="{{ m.download_url }}" style="width: 100%; margin-top: 1em;">
    Your browser does not support the audio element.
    <a href="{{ m.download_url }}">Download audio</a>.
  </audio>
{%- elif m.artwork_url %}
  <img class="artwork" src="{{ m.artwork_url }}" alt="Artwork">
{%- endif %}

  <h1>{{ m.title }}</h1>
  <div class="meta">
    <strong>Filename:</strong> {% if m.download_url and m.filename %}<a class="download" href="{{ m.download_url }}" download>{{ m.filename }}</a>{% else %}{{ m.filename }}{% endif %}<br/>
    <strong>Size:</strong> {{ m.size_label }}<br/>
    <strong>Type:</strong> {{ m.mime_type }}
  </div>

  <div>{{ description_html }}</div>

  <details>
    <summary>Debug JSON</summary>
    <pre class="raw-json">{{ debug_json }}</pre>
  </details>

  <div class="cid">CID: {{ m.cid }}</div>
  <script type="module">
    import { sdk } from "{{ app.sdk_url }}";
    sdk.actions.ready().then(() => {
      console.log("MiniApp ready in Farcaster");
    }).catch(err => {
      console.warn("Frame SDK not initialized", err);
    });
  </script>
</body>
</html>
"""
