# page.py
"""
The single page served at "/".

It only talks to /upload and /transform and renders the state they return.
"""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Image Transformer</title>
  <style>
    body { font-family: sans-serif; max-width: 960px; margin: 2rem auto; padding: 0 1rem; }
    main { display: grid; grid-template-columns: 1fr 1fr; gap: 2rem; }
    img { max-width: 100%; }
    .error { color: #b91c1c; }
    footer { margin-top: 3rem; text-align: center; color: #9ca3af; }
  </style>
</head>
<body>
  <header>
    <h1>Image Transformer</h1>
    <p>Convert dark-mode equations, screenshots, or sketches into high-contrast
    black and white images. Perfect for printing or clean documentation.</p>
  </header>

  <main>
    <section>
      <h2>1. Upload Input</h2>
      <input id="file" type="file" accept="image/*">
      <div><img id="input" alt="" hidden></div>
      <button id="transform" hidden>Apply Transformation</button>
    </section>

    <section>
      <h2>2. Result</h2>
      <p id="loading" hidden>Transforming...</p>
      <p id="error" class="error" hidden></p>
      <img id="output" alt="Transformed image" hidden>
    </section>
  </main>

  <footer>Powered by Gemini 2.5 Flash Image Model</footer>

  <script>
    const fileInput = document.getElementById("file");
    const button = document.getElementById("transform");

    function render(state) {
      const input = document.getElementById("input");
      const output = document.getElementById("output");
      const error = document.getElementById("error");

      input.hidden = !state.input;
      if (state.input) input.src = state.input;

      button.hidden = !state.input;
      button.disabled = state.loading;
      button.textContent = state.loading ? "Transforming..." : "Apply Transformation";
      document.getElementById("loading").hidden = !state.loading;

      output.hidden = !state.output;
      if (state.output) output.src = state.output;

      error.hidden = !state.error;
      error.textContent = state.error || "";
    }

    async function send(path, body) {
      const response = await fetch(path, { method: "POST", body: body });
      const data = await response.json();
      if (!response.ok) throw new Error(data.detail || response.statusText);
      return data;
    }

    fileInput.addEventListener("change", async () => {
      const file = fileInput.files[0];
      if (!file) return;
      const form = new FormData();
      form.append("file", file);
      try {
        render(await send("/upload", form));
      } catch (err) {
        render({ input: null, output: null, loading: false, error: err.message });
      }
    });

    button.addEventListener("click", async () => {
      render({ ...currentState(), loading: true });
      try {
        render(await send("/transform"));
      } catch (err) {
        render({ ...currentState(), loading: false, output: null, error: err.message });
      }
    });

    function currentState() {
      const input = document.getElementById("input");
      const output = document.getElementById("output");
      return {
        input: input.hidden ? null : input.src,
        output: output.hidden ? null : output.src,
        error: null,
        loading: false,
      };
    }

    fetch("/state").then((r) => r.json()).then(render);
  </script>
</body>
</html>
"""
