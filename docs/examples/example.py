import numpy as np
import matplotlib.pyplot as plt
from alpha_stable import AlphaStable

alpha = 1.4
beta = 0.9
sigma = 0.5
mu_0 = 1

dist = AlphaStable.from_s0(alpha, beta, sigma, mu_0)

x_vals = np.linspace(-10, 10, 400)
y = dist.pdf(x_vals)

samples = dist.sample(np.random.default_rng(7), size=20000)
samples = samples[(samples > x_vals[0]) & (samples < x_vals[-1])]

# Plotting

plt.hist(samples, bins=200, density=True, alpha=0.4, label="CMS samples")
plt.plot(x_vals, y, label="Stable PDF", linewidth=2)
plt.title(f"Stable PDF (alpha={alpha}, beta={beta})")
plt.xlabel("x")
plt.ylabel("PDF")
plt.legend()
plt.grid(True)

plt.show()
