import logging
import gradio as gr
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from typing import Dict, Any
from fuelcost import FuelCostCalculator, comparison_markdown, journey_cost_markdown, tax_label
from fuelcost.const import DISTANCE_UNITS, GALLON_TYPES, GALLON_UK, MILES, PLACEHOLDERS

_LOGGER = logging.getLogger(__name__)

# Init engine
calc = FuelCostCalculator()

FIELDS = ["distance", "unit", "mpg", "gallon", "price_per_litre", "diesel_tax",
          "kwh_per_100km", "price_per_kwh", "electric_tax"]

# Plot helper
def plot_cost_breakdown(breakdown: pd.DataFrame, curve: pd.DataFrame, unit: str, title="Journey Cost"):
    fig, (ax_bar, ax_line) = plt.subplots(1, 2, figsize=(10, 4))

    x = np.arange(len(breakdown))
    width = 0.35
    ax_bar.bar(x - width/2, breakdown["fuel_cost"], width, label="Fuel / Energy")
    ax_bar.bar(x + width/2, breakdown["tax_cost"], width, label="Tax")
    ax_bar.set_ylabel("Cost")
    ax_bar.set_title(title)
    ax_bar.set_xticks(x)
    ax_bar.set_xticklabels(breakdown["fuel"])
    ax_bar.legend()

    ax_line.plot(curve["distance"], curve["diesel"], label="Diesel/Petrol")
    ax_line.plot(curve["distance"], curve["electric"], label="Electric")
    ax_line.set_xlabel(f"Distance ({unit})")
    ax_line.set_title("Cost over distance")
    ax_line.legend()

    plt.tight_layout()
    return fig

# Payload builder
def build_payload(*values) -> Dict[str, Any]:
    return dict(zip(FIELDS, values))

# Main calculation, re-run on every input change
def run_calculation(
    distance, unit,
    mpg, gallon, price_per_litre, diesel_tax,
    kwh_per_100km, price_per_kwh, electric_tax
):
    payload = build_payload(distance, unit, mpg, gallon, price_per_litre, diesel_tax,
                            kwh_per_100km, price_per_kwh, electric_tax)
    result = calc.calculate(payload)
    trip = result["trip"]

    diesel_md = journey_cost_markdown("Diesel/Petrol", result["diesel"], trip.unit)
    electric_md = journey_cost_markdown("Electric", result["electric"], trip.unit)
    comparison_md = comparison_markdown(result["comparison"])

    breakdown = calc.breakdown(result)
    fig = plot_cost_breakdown(breakdown, calc.cost_curve(payload), trip.unit)
    plt.close(fig)

    return diesel_md, electric_md, comparison_md, breakdown, fig

# Relabel both tax fields when the distance unit changes
def on_unit_change(unit):
    label = tax_label(unit)
    return gr.update(label=label), gr.update(label=label)

# Gradio Interface
def create_interface():
    with gr.Blocks(title="Fuel Cost Calculator") as demo:
        gr.Markdown("# ⛽ FUEL COST CALCULATOR")
        gr.Markdown("Compare the cost of a journey in a diesel/petrol car against an electric one.")

        with gr.Row():
            distance = gr.Number(value=None, label="Distance", info=f"e.g. {PLACEHOLDERS['distance']}", minimum=0)
            unit = gr.Dropdown(DISTANCE_UNITS, value=MILES, label="Distance Unit")

        with gr.Row():
            with gr.Group():
                gr.Markdown("### Diesel/Petrol")
                mpg = gr.Number(value=None, label="Fuel Efficiency (MPG)", info=f"e.g. {PLACEHOLDERS['mpg']}", minimum=0)
                gallon = gr.Dropdown(GALLON_TYPES, value=GALLON_UK, label="Gallon")
                price_per_litre = gr.Number(value=None, label="Cost per Litre", info=f"e.g. {PLACEHOLDERS['price_per_litre']}", minimum=0)
                diesel_tax = gr.Number(value=None, label=tax_label(MILES), info=PLACEHOLDERS["tax"], minimum=0)

            with gr.Group():
                gr.Markdown("### Electric")
                kwh_per_100km = gr.Number(value=None, label="kWh per 100km", info=f"e.g. {PLACEHOLDERS['kwh_per_100km']}", minimum=0)
                price_per_kwh = gr.Number(value=None, label="Cost per kWh", info=f"e.g. {PLACEHOLDERS['price_per_kwh']}", minimum=0)
                electric_tax = gr.Number(value=None, label=tax_label(MILES), info=PLACEHOLDERS["tax"], minimum=0)

        with gr.Row():
            diesel_out = gr.Markdown()
            electric_out = gr.Markdown()
        comparison_out = gr.Markdown()
        breakdown_out = gr.Dataframe(interactive=False)
        out_fig = gr.Plot()

        unit.change(fn=on_unit_change, inputs=[unit], outputs=[diesel_tax, electric_tax])

        inputs = [distance, unit, mpg, gallon, price_per_litre, diesel_tax,
                  kwh_per_100km, price_per_kwh, electric_tax]
        outputs = [diesel_out, electric_out, comparison_out, breakdown_out, out_fig]
        for component in inputs:
            component.change(fn=run_calculation, inputs=inputs, outputs=outputs)
        demo.load(fn=run_calculation, inputs=inputs, outputs=outputs)

    return demo

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo = create_interface()
    _LOGGER.info("Starting fuel cost calculator")
    demo.launch()
