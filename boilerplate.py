# boilerplate.py

# string.Template placeholders: $prompt and the seven palette keys.
# Keep literal dollar signs out of the markup and script below.
PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>$prompt</title>
  <style>
    :root {
      --bg-0: $bg0;
      --bg-1: $bg1;
      --ink: $ink;
      --panel: $panel;
      --accent-a: $accent_a;
      --accent-b: $accent_b;
      --muted: $muted;
    }
    * { box-sizing: border-box; margin: 0; padding: 0; }
    body {
      min-height: 100vh;
      display: grid;
      place-items: center;
      overflow: hidden;
      color: var(--ink);
      background: radial-gradient(circle at 20% 15%, var(--bg-1), var(--bg-0) 70%);
      font-family: 'Space Grotesk', 'Helvetica Neue', sans-serif;
    }
    #field { position: fixed; inset: 0; width: 100%; height: 100%; }
    .stage {
      position: relative;
      z-index: 1;
      display: grid;
      gap: 1.25rem;
      max-width: 720px;
      margin: 1.5rem;
      padding: 3rem 2.5rem;
      text-align: center;
      background: var(--panel);
      border-radius: 28px;
      box-shadow: 0 30px 80px rgba(0, 0, 0, 0.45), inset 0 1px 0 rgba(255, 255, 255, 0.12);
      backdrop-filter: blur(14px);
      animation: rise 900ms cubic-bezier(0.2, 0.8, 0.2, 1) both;
    }
    .eyebrow {
      font-size: 0.75rem;
      letter-spacing: 0.32em;
      text-transform: uppercase;
      color: var(--muted);
    }
    h1 {
      font-size: clamp(2rem, 6vw, 4rem);
      line-height: 1.05;
      background: linear-gradient(120deg, var(--accent-a), var(--accent-b));
      -webkit-background-clip: text;
      background-clip: text;
      color: transparent;
    }
    .hint { color: var(--muted); line-height: 1.6; }
    button {
      justify-self: center;
      padding: 0.85rem 1.75rem;
      border: 0;
      border-radius: 999px;
      font: inherit;
      font-weight: 600;
      color: var(--bg-0);
      background: linear-gradient(120deg, var(--accent-a), var(--accent-b));
      cursor: pointer;
      transition: transform 180ms ease, box-shadow 180ms ease;
    }
    button:hover {
      transform: translateY(-2px) scale(1.03);
      box-shadow: 0 14px 34px rgba(0, 0, 0, 0.35);
    }
    @keyframes rise {
      from { opacity: 0; transform: translateY(24px); }
      to { opacity: 1; transform: none; }
    }
  </style>
</head>
<body>
  <canvas id="field"></canvas>
  <main class="stage">
    <span class="eyebrow">Generated concept</span>
    <h1>$prompt</h1>
    <p class="hint">Move the pointer to stir the particle field. Reshuffle to change how many particles drift behind this card.</p>
    <button id="reshuffle" type="button">Reshuffle particles</button>
  </main>
  <script>
    const canvas = document.getElementById('field');
    const ctx = canvas.getContext('2d');
    const colors = ['$accent_a', '$accent_b', '$muted'];
    let particles = [];
    let speed = 1;

    function resize() {
      canvas.width = window.innerWidth;
      canvas.height = window.innerHeight;
    }

    function seed(count) {
      particles = Array.from({ length: count }, () => ({
        x: Math.random() * canvas.width,
        y: Math.random() * canvas.height,
        vx: (Math.random() - 0.5) * 1.2,
        vy: (Math.random() - 0.5) * 1.2,
        r: 1 + Math.random() * 2.5,
        c: colors[Math.floor(Math.random() * colors.length)]
      }));
    }

    function tick() {
      ctx.clearRect(0, 0, canvas.width, canvas.height);
      for (const p of particles) {
        p.x += p.vx * speed;
        p.y += p.vy * speed;
        if (p.x < 0 || p.x > canvas.width) p.vx *= -1;
        if (p.y < 0 || p.y > canvas.height) p.vy *= -1;
        ctx.beginPath();
        ctx.fillStyle = p.c;
        ctx.arc(p.x, p.y, p.r, 0, Math.PI * 2);
        ctx.fill();
      }
      speed += (1 - speed) * 0.02;
      requestAnimationFrame(tick);
    }

    window.addEventListener('resize', resize);
    window.addEventListener('pointermove', (e) => {
      const push = Math.hypot(e.movementX || 0, e.movementY || 0);
      speed = Math.min(6, 1 + push / 8);
    });
    document.getElementById('reshuffle').addEventListener('click', () => {
      seed(60 + Math.floor(Math.random() * 180));
    });

    resize();
    seed(120);
    tick();
  </script>
</body>
</html>
"""
