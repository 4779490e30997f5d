"""Built-in single-page capture UI served by the gateway."""

CAPTURE_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Can I Park Here?</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: #f9fafb; }
      main { max-width: 28rem; margin: 0 auto; padding: 1rem; }
      h1 { text-align: center; font-size: 1.5rem; }
      .gallery { display: flex; gap: 1rem; overflow-x: auto; margin-bottom: 1.5rem; }
      .thumb { position: relative; flex: none; }
      .thumb img { height: 10rem; width: 10rem; object-fit: cover; border-radius: 0.5rem; }
      .thumb button { position: absolute; top: -0.5rem; right: -0.5rem;
                      background: #ef4444; color: #fff; border: 0;
                      border-radius: 9999px; width: 1.5rem; height: 1.5rem; }
      .controls { display: flex; gap: 1rem; margin-bottom: 1.5rem; }
      .controls button, #analyze { flex: 1; padding: 1rem; border: 0;
                                   border-radius: 0.5rem; color: #fff; }
      #camera { background: #3b82f6; }
      #upload { background: #6b7280; }
      #analyze { width: 100%; background: #22c55e; margin-bottom: 1.5rem; }
      #analyze:disabled { opacity: 0.5; }
      .spinner { display: inline-block; width: 1rem; height: 1rem;
                 margin-right: 0.5rem; vertical-align: -0.15rem;
                 border: 2px solid rgba(255, 255, 255, 0.4);
                 border-top-color: #fff; border-radius: 9999px;
                 animation: spin 0.8s linear infinite; }
      @keyframes spin { to { transform: rotate(360deg); } }
      .hidden { display: none; }
      .card { background: #fff; padding: 1.5rem; border-radius: 0.5rem;
              box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1); }
      .allowed { color: #22c55e; }
      .denied { color: #ef4444; }
      .muted { color: #4b5563; }
      .error { color: #b91c1c; margin-bottom: 1rem; }
    </style>
  </head>
  <body>
    <main>
      <h1>Can I Park Here?</h1>
      <div id="gallery" class="gallery"></div>
      <div class="controls">
        <button id="camera" type="button">Take Photo</button>
        <button id="upload" type="button">Upload</button>
      </div>
      <input id="camera-input" class="hidden" type="file" accept="image/*"
             capture="environment" />
      <input id="upload-input" class="hidden" type="file" accept="image/*" multiple />
      <button id="analyze" class="hidden" type="button">
        <span id="spinner" class="spinner hidden"></span><span id="analyze-label">Analyze Signs</span>
      </button>
      <p id="error" class="error hidden"></p>
      <section id="result" class="card hidden"></section>
    </main>
    <script>
      const ERROR_MESSAGE = 'Failed to analyze parking signs. Please try again.';
      let state = { images: [], phase: 'idle', verdict: null, error: null };

      function settle(images) {
        return images.length ? 'imagesSelected' : 'idle';
      }

      function reduce(current, action) {
        switch (action.type) {
          case 'imagesAdded': {
            const images = current.images.concat(action.images);
            if (current.phase === 'analyzing') return { ...current, images };
            return { ...current, images, phase: settle(images), verdict: null, error: null };
          }
          case 'imageRemoved': {
            if (action.index < 0 || action.index >= current.images.length) {
              return current;
            }
            const images = current.images.filter((_, i) => i !== action.index);
            if (current.phase === 'analyzing') return { ...current, images };
            return { ...current, images, phase: settle(images), verdict: null, error: null };
          }
          case 'analysisStarted':
            if (!current.images.length || current.phase === 'analyzing') {
              return current;
            }
            return { ...current, phase: 'analyzing', verdict: null, error: null };
          case 'analysisSucceeded':
            if (current.phase !== 'analyzing') return current;
            return { ...current, phase: 'resultShown', verdict: action.verdict };
          case 'analysisFailed':
            if (current.phase !== 'analyzing') return current;
            return { ...current, phase: 'errorShown', error: ERROR_MESSAGE };
          default:
            return current;
        }
      }

      function dispatch(action) {
        state = reduce(state, action);
        render(state);
      }

      function el(tag, attrs, text) {
        const node = document.createElement(tag);
        Object.assign(node, attrs || {});
        if (text !== undefined) node.textContent = text;
        return node;
      }

      function render(current) {
        const gallery = document.getElementById('gallery');
        gallery.replaceChildren(...current.images.map((src, index) => {
          const thumb = el('div', { className: 'thumb' });
          thumb.append(el('img', { src, alt: 'Parking sign ' + (index + 1) }));
          const remove = el('button', { type: 'button' }, '\\u00d7');
          remove.onclick = () => dispatch({ type: 'imageRemoved', index });
          thumb.append(remove);
          return thumb;
        }));

        const analyze = document.getElementById('analyze');
        const busy = current.phase === 'analyzing';
        analyze.classList.toggle('hidden', !current.images.length);
        analyze.disabled = busy || !current.images.length;
        document.getElementById('spinner').classList.toggle('hidden', !busy);
        document.getElementById('analyze-label').textContent =
          busy ? 'Analyzing...' : 'Analyze Signs';

        const error = document.getElementById('error');
        error.classList.toggle('hidden', !current.error);
        error.textContent = current.error || '';

        const result = document.getElementById('result');
        result.classList.toggle('hidden', !current.verdict);
        result.replaceChildren();
        if (!current.verdict) return;
        const verdict = current.verdict;
        const heading = el('h2', {
          className: verdict.canPark ? 'allowed' : 'denied',
        }, (verdict.canPark ? '\\u2713 Parking Allowed' : '\\u2717 No Parking'));
        result.append(heading, el('p', { className: 'muted' }, verdict.explanation));
        if (verdict.restrictions && verdict.restrictions.length) {
          result.append(el('h3', {}, 'Restrictions:'));
          const list = el('ul');
          verdict.restrictions.forEach((item) => list.append(el('li', {}, item)));
          result.append(list);
        }
        if (verdict.timeLimit !== undefined && verdict.timeLimit !== null) {
          result.append(el('p', { className: 'muted' },
            'Time limit: ' + verdict.timeLimit + ' minutes'));
        }
      }

      function readAsDataUrl(file) {
        return new Promise((resolve, reject) => {
          const reader = new FileReader();
          reader.onloadend = () => resolve(reader.result);
          reader.onerror = () => reject(reader.error);
          reader.readAsDataURL(file);
        });
      }

      function handleFiles(event) {
        const files = Array.from(event.target.files || []);
        files.filter((file) => file.type.startsWith('image/')).forEach((file) => {
          readAsDataUrl(file).then((url) => dispatch({ type: 'imagesAdded', images: [url] }));
        });
        event.target.value = '';
      }

      async function analyzeImages() {
        if (!state.images.length || state.phase === 'analyzing') return;
        dispatch({ type: 'analysisStarted' });
        try {
          const response = await fetch('/api/analyze', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ images: state.images }),
          });
          if (!response.ok) throw new Error('Failed to analyze images');
          dispatch({ type: 'analysisSucceeded', verdict: await response.json() });
        } catch (err) {
          dispatch({ type: 'analysisFailed' });
        }
      }

      document.getElementById('camera').onclick =
        () => document.getElementById('camera-input').click();
      document.getElementById('upload').onclick =
        () => document.getElementById('upload-input').click();
      document.getElementById('camera-input').onchange = handleFiles;
      document.getElementById('upload-input').onchange = handleFiles;
      document.getElementById('analyze').onclick = analyzeImages;
      render(state);
    </script>
  </body>
</html>
"""
