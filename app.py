import logging
import os

import gradio as gr

from json_schema_pruner.handlers import (
    clear_result,
    describe_schema_handler,
    load_document_file,
    load_schema_file,
    prune_handler,
    sample_inputs,
)
from json_schema_pruner.logging_utils import configure_split_stream_logging, level_from_name

# --- UI Definition ---
with gr.Blocks(title="JSON Schema Pruner") as demo:
    gr.Markdown("# JSON Schema Pruner")
    gr.Markdown("Upload or paste a JSON document and a schema. Only the fields the schema declares are kept.")

    with gr.Tab("Prune"):
        with gr.Row():
            # Left Panel: Inputs
            with gr.Column(scale=1):
                gr.Markdown("### 1. Document")
                document_file = gr.File(label="Upload JSON Document", file_types=[".json"])
                document_text = gr.Code(label="Document", language="json", interactive=True)

                gr.Markdown("### 2. Schema")
                schema_file = gr.File(label="Upload JSON Schema", file_types=[".json"])
                schema_text = gr.Code(label="Schema", language="json", interactive=True)

                load_sample_btn = gr.Button("Load Example")

            # Right Panel: Result
            with gr.Column(scale=1):
                gr.Markdown("### 3. Prune")
                pretty_output = gr.Checkbox(label="Pretty-print output", value=True)
                output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="pruned")
                prune_btn = gr.Button("Prune Document", variant="primary")
                status_msg = gr.Textbox(label="Status", interactive=False)
                download_output = gr.File(label="Download Result")
                result_preview = gr.JSON(label="Pruned Document")

    with gr.Tab("Schema"):
        gr.Markdown("Normalised view of the schema currently in the editor.")
        schema_status = gr.Textbox(label="Schema Status", interactive=False)
        schema_preview = gr.JSON(label="Declared Fields")

    document_file.upload(
        fn=load_document_file,
        inputs=[document_file],
        outputs=[document_text, status_msg],
    )

    schema_file.upload(
        fn=load_schema_file,
        inputs=[schema_file],
        outputs=[schema_text, status_msg],
    )

    load_sample_btn.click(
        fn=sample_inputs,
        inputs=[],
        outputs=[document_text, schema_text],
    )

    document_text.change(
        fn=clear_result,
        inputs=[],
        outputs=[result_preview, download_output, status_msg],
    )

    schema_text.change(
        fn=describe_schema_handler,
        inputs=[schema_text],
        outputs=[schema_preview, schema_status],
    )

    prune_btn.click(
        fn=prune_handler,
        inputs=[document_text, schema_text, pretty_output, output_filename],
        outputs=[result_preview, download_output, status_msg],
    )

if __name__ == "__main__":
    configure_split_stream_logging(level=level_from_name(os.environ.get("JSON_SCHEMA_PRUNER_LOG_LEVEL")))
    demo.launch()
