# main.py
"""
Main file that controls GUI
"""
import sys

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from rle_commands import Action, CodecCommands

BUTTON_STYLE = """
    font-size: 15px;
    color: white;
    font-weight: 500;
    background-color: {color};
    border-radius: 10px;
    """


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self, commands: CodecCommands):
        super().__init__()
        self.commands = commands
        self.setFixedSize(QSize(700, 420))
        self.setWindowTitle("RLE Encoder/Decoder")

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet(
            """
            background-color: #E8EEF2;
            """
        )

        self.name = QLabel("RLE Encoder/Decoder")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            """
            font-size: 35px;
            color: #0E103D;
            font-weight: 700;
        """
        )
        self.layout.addWidget(self.name)

        self.text_entry = QLineEdit()
        self.text_entry.setPlaceholderText("Type text to encode or hex to decode")
        self.text_entry.setStyleSheet(
            """
            background-color: white;
            padding: 5px 10px;
            font-size: 15px;
            color: black;
            border-radius: 10px;
            """
        )
        self.text_entry.setFixedHeight(40)
        self.layout.addWidget(self.text_entry)

        text_layout = QHBoxLayout()
        self.encode_button = self._make_button("Encode", "#0E103D", self.on_encode_clicked)
        self.decode_button = self._make_button("Decode", "#3590F3", self.on_decode_clicked)
        text_layout.addStretch()
        text_layout.addWidget(self.encode_button)
        text_layout.addWidget(self.decode_button)
        text_layout.addStretch()
        self.layout.addLayout(text_layout)

        file_layout = QHBoxLayout()
        self.encode_file_button = self._make_button(
            "Encode file", "#0E103D", self.on_encode_file_clicked
        )
        self.decode_file_button = self._make_button(
            "Decode file", "#3590F3", self.on_decode_file_clicked
        )
        file_layout.addStretch()
        file_layout.addWidget(self.encode_file_button)
        file_layout.addWidget(self.decode_file_button)
        file_layout.addStretch()
        self.layout.addLayout(file_layout)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(
            """
            font-size: 15px;
            color: black;
            font-weight: 500;
            """
        )
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.status_label)

        about_layout = QHBoxLayout()
        self.about_button = self._make_button("About", "#6C757D", self.on_about_clicked)
        about_layout.addStretch()
        about_layout.addWidget(self.about_button)
        self.layout.addLayout(about_layout)

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    def _make_button(self, title, color, handler):
        button = QPushButton(title)
        button.setStyleSheet(BUTTON_STYLE.format(color=color))
        button.setFixedSize(QSize(200, 50))
        button.clicked.connect(handler)
        return button

    def on_encode_clicked(self):
        self.text_action(Action.ENCODE)

    def on_decode_clicked(self):
        self.text_action(Action.DECODE)

    def on_encode_file_clicked(self):
        self.file_action(Action.ENCODE)

    def on_decode_file_clicked(self):
        self.file_action(Action.DECODE)

    def on_about_clicked(self):
        QMessageBox.about(
            self,
            "About",
            "RLE Encoder/Decoder\n\n"
            "Run-length encodes text (shown as hex) and whole files.",
        )

    def text_action(self, action: Action):
        """
        function replaces the entry text with its encoded or decoded form
        """
        try:
            result = self.commands.text_action(action, self.text_entry.text())
        except ValueError as e:
            QMessageBox.warning(self, "Invalid input", str(e))
            return

        self.text_entry.setText(result)

    def file_action(self, action: Action):
        """
        function handles file encoding and decoding
        """
        title = "Encode file" if action is Action.ENCODE else "Decode file"
        dialog = QFileDialog(self, title)
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        if not dialog.exec():
            return

        selected_file = dialog.selectedFiles()[0]
        try:
            output_path = self.commands.file_action(action, selected_file)
        except ValueError as e:
            QMessageBox.warning(self, "Invalid file", str(e))
            return
        except OSError as e:
            QMessageBox.warning(self, "File error", str(e))
            return

        self.status_label.setText(self.commands.last_report)
        QMessageBox.information(
            self, "Success", self.commands.file_summary(output_path)
        )


if __name__ == "__main__":
    app = QApplication(sys.argv)
    window = MainWindow(CodecCommands())
    window.show()
    sys.exit(app.exec())
