from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Avatar:
    id: str
    filename: str
    name: str

    @property
    def url(self) -> str:
        return get_avatar_url(self.filename)

    def to_dict(self) -> dict:
        return {"id": self.id, "filename": self.filename, "name": self.name, "url": self.url}


AVATARS: tuple[Avatar, ...] = (
    Avatar("anura", "anura.jpg", "Anura Kumara Dissanayake"),
    Avatar("anurudda", "anurudda.jpg", "Anurudda"),
    Avatar("bruno", "bruno.jpeg", "Bruno Diwakara"),
    Avatar("carlo", "carlo.jpg", "Carlo"),
    Avatar("chinthana", "chinthana.jpg", "Chinthana Dharmadasa"),
    Avatar("dayan", "dayan.jpg", "Dayan Jayatilleka"),
    Avatar("deepthi", "deepthi.jpg", "Deepthi Kumara"),
    Avatar("eranda", "eranda.jpg", "Eranda Ginige"),
    Avatar("harini", "harini.jpg", "Harini Amarasooriya"),
    Avatar("iraj", "iraj.jpg", "Iraj"),
    Avatar("jr", "JR.jpg", "J.R. Jayewardene"),
    Avatar("mahinda", "mahinda.jpeg", "Mahinda Rajapaksa"),
    Avatar("mathini", "mathini.jpg", "Mathini"),
    Avatar("melani", "melani.jpeg", "Melani Gunathilake"),
    Avatar("nalin", "nalin.jpg", "Nalin De Silva"),
    Avatar("nirmal", "nirmal_dewasiri.jpg", "Nirmal Dewasiri"),
    Avatar("pubudu", "pubudu_jagoda.jpg", "Pubudu Jagoda"),
    Avatar("ranil", "ranil.jpg", "Ranil Wickremesinghe"),
    Avatar("sajith", "sajithpremadasa.jpg", "Sajith Premadasa"),
    Avatar("sandakath", "sandakath.jpg", "Sandakath Mahagamaarachchi"),
    Avatar("sarath", "Sarath_Wijesuriya.jpg", "Sarath Wijesuriya"),
    Avatar("shiral", "shiral_lakthilaka.jpg", "Shiral Lakthilaka"),
    Avatar("swrd", "swrd.jpg", "S.W.R.D. Bandaranaike"),
    Avatar("thamalu", "thamalu.jpg", "Thamalu Piyadigama"),
    Avatar("tilvin", "tilvin.jpg", "Tilvin Perera"),
    Avatar("upali", "upali_kohomban.jpg", "Upali Kohomban"),
    Avatar("wangeesa", "wangeesa.jpeg", "Wangeesa Sumanasekara"),
    Avatar("wimal", "wimal_weerawansa.jpg", "Wimal Weerawansa"),
)

DEFAULT_AVATAR = AVATARS[0].filename
AVATAR_FILENAMES = frozenset(avatar.filename for avatar in AVATARS)


def get_avatar_url(filename: str) -> str:
    return f"/people/{filename}"
