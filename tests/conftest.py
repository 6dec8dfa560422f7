import os
import pytest

# category -> {file name: contents}
TOY_CORPUS = {
    "Games": {
        "Minecraft": "Minecraft is a sandbox game\nplayers build with blocks in Minecraft",
        "Chess": "chess is a board game\nchess players move pieces",
    },
    "Programming": {
        "Python": "Python is a programming language\npython code is readable",
        "Java": "Java is a programming language\nJava runs on the JVM",
    },
}


def write_corpus(root, corpus=TOY_CORPUS):
    for category, files in corpus.items():
        folder = os.path.join(root, category)
        os.makedirs(folder, exist_ok=True)
        for name, text in files.items():
            with open(os.path.join(folder, name), "w", encoding="utf-8") as f:
                f.write(text)
    return str(root)


@pytest.fixture
def corpus_dir(tmp_path):
    return write_corpus(tmp_path)
