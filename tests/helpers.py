import base64


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def runnable_config(model_name=None, **configurable):
    if model_name is not None:
        configurable["customModelName"] = model_name
    return {"configurable": configurable}
